"""Snowflake database service: the idea record store."""
import json
import logging
from contextlib import contextmanager
from typing import Any, Generator, Optional
from uuid import uuid4

import snowflake.connector
from snowflake.connector import SnowflakeConnection
from snowflake.connector.cursor import SnowflakeCursor

from idea_validator.config import get_settings

logger = logging.getLogger(__name__)

_IDEA_COLS = "id, owner_id, owner_email, owner_name, idea_text, contact, analysis, submitted_at"


class SnowflakeService:
    """Service for Snowflake database operations."""
    
    def __init__(self):
        self.settings = get_settings()
        self._connection: Optional[SnowflakeConnection] = None
    
    def _get_connection_params(self) -> dict[str, Any]:
        """Get connection parameters."""
        return {
            "account": self.settings.snowflake_account,
            "user": self.settings.snowflake_user,
            "password": self.settings.snowflake_password,
            "database": self.settings.snowflake_database,
            "schema": self.settings.snowflake_schema,
            "warehouse": self.settings.snowflake_warehouse,
        }
    
    def connect(self) -> SnowflakeConnection:
        """Establish connection to Snowflake."""
        if self._connection is None or self._connection.is_closed():
            self._connection = snowflake.connector.connect(
                **self._get_connection_params()
            )
        return self._connection
    
    def disconnect(self) -> None:
        """Close the Snowflake connection."""
        if self._connection and not self._connection.is_closed():
            self._connection.close()
            self._connection = None
    
    @contextmanager
    def cursor(self) -> Generator[SnowflakeCursor, None, None]:
        """Context manager for database cursor."""
        conn = self.connect()
        cur = conn.cursor()
        try:
            yield cur
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Database error: {e}")
            raise
        finally:
            cur.close()
    
    async def health_check(self) -> tuple[bool, Optional[str]]:
        """Check if Snowflake connection is healthy."""
        try:
            with self.cursor() as cur:
                cur.execute("SELECT 1")
                result = cur.fetchone()
                return result is not None, None
        except Exception as e:
            return False, str(e)
    
    def execute_query(
        self, 
        query: str, 
        params: Optional[tuple] = None
    ) -> list[dict[str, Any]]:
        """Execute a query and return results as list of dicts."""
        with self.cursor() as cur:
            cur.execute(query, params)
            columns = [desc[0].lower() for desc in cur.description] if cur.description else []
            rows = cur.fetchall()
            return [dict(zip(columns, row)) for row in rows]
    
    def execute_write(
        self, 
        query: str, 
        params: Optional[tuple] = None
    ) -> int:
        """Execute an INSERT/UPDATE/DELETE and return affected rows."""
        with self.cursor() as cur:
            cur.execute(query, params)
            return cur.rowcount

    # ================================================================
    # Idea Records
    # ================================================================

    def insert_idea(
        self,
        owner_id: str,
        owner_email: Optional[str],
        owner_name: Optional[str],
        idea_text: str,
        contact: dict[str, Any],
        analysis: Optional[dict[str, Any]] = None,
    ) -> str:
        """Insert an idea record; submitted_at is assigned by the database."""
        idea_id = str(uuid4())

        # PARSE_JSON is not allowed in a VALUES clause
        query = f"""
            INSERT INTO {self.settings.ideas_table} ({_IDEA_COLS})
            SELECT %s, %s, %s, %s, %s, PARSE_JSON(%s), PARSE_JSON(%s), CURRENT_TIMESTAMP()
        """

        self.execute_write(query, (
            idea_id,
            owner_id,
            owner_email,
            owner_name,
            idea_text,
            json.dumps(contact),
            json.dumps(analysis) if analysis is not None else None,
        ))

        logger.info(f"Inserted idea {idea_id} for owner {owner_id}")
        return idea_id

    def get_ideas_for_owner(self, owner_id: str) -> list[dict[str, Any]]:
        """All idea rows of one owner, in no particular order."""
        query = f"SELECT {_IDEA_COLS} FROM {self.settings.ideas_table} WHERE owner_id = %s"
        return self.execute_query(query, (owner_id,))


# Singleton instance
_snowflake_service: Optional[SnowflakeService] = None


def get_snowflake_service() -> SnowflakeService:
    """Get or create Snowflake service singleton."""
    global _snowflake_service
    if _snowflake_service is None:
        _snowflake_service = SnowflakeService()
    return _snowflake_service
