"""Services package - database, cache, AI and export clients."""
from .snowflake import SnowflakeService, get_snowflake_service
from .redis_cache import RedisCache, CacheKeys, get_redis_cache
from .gemini import GeminiClient, get_gemini_client
from .sheet_export import SheetExporter, get_sheet_exporter

__all__ = [
    "SnowflakeService",
    "get_snowflake_service",
    "RedisCache",
    "CacheKeys", 
    "get_redis_cache",
    "GeminiClient",
    "get_gemini_client",
    "SheetExporter",
    "get_sheet_exporter",
]
