"""Configuration management using Pydantic Settings."""
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )
    
    # Application
    app_name: str = "Idea Validator"
    app_version: str = "1.0.0"
    debug: bool = False
    
    # Generative AI endpoint (Gemini)
    gemini_api_key: str = Field(default="", validation_alias="GEMINI_API_KEY")
    gemini_model: str = "gemini-2.0-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: float = 60.0
    gemini_max_retries: int = 2
    gemini_retry_delay: float = 1.0
    
    # Side-channel export (Google Apps Script web app); empty disables export
    sheet_webhook_url: str = Field(default="", validation_alias="SHEET_WEBHOOK_URL")
    sheet_timeout_seconds: float = 10.0
    
    # Snowflake
    snowflake_account: str = ""
    snowflake_user: str = ""
    snowflake_password: str = ""
    snowflake_database: str = "IDEA_VALIDATOR"
    snowflake_schema: str = "PUBLIC"
    snowflake_warehouse: str = "COMPUTE_WH"
    ideas_table: str = "ideas"
    
    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    
    # Cache TTLs (seconds)
    cache_ttl_dashboard: int = 300  # 5 minutes

    # Analytics flavor fields: stable per idea unless disabled
    analytics_stable_flavor: bool = True
    analytics_flavor_seed: str = "idea-validator"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
