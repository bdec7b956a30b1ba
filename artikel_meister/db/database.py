import os
import logging
import psycopg2
from psycopg2.extras import RealDictCursor
from typing import Dict, Optional
from datetime import datetime

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Параметры подключения к базе данных по умолчанию
DB_PARAMS = {
    "dbname": os.environ.get("ARTIKEL_DB_NAME", "artikel_meister"),
    "user": os.environ.get("ARTIKEL_DB_USER", "postgres"),
    "password": os.environ.get("ARTIKEL_DB_PASSWORD", ""),
    "host": os.environ.get("ARTIKEL_DB_HOST", "localhost"),
    "port": os.environ.get("ARTIKEL_DB_PORT", "5432"),
}

# Строка подключения имеет приоритет над отдельными параметрами
DATABASE_URL = os.environ.get("DATABASE_URL")


class KeyValueStore:
    """Простое хранилище строк по ключу. Реализации подставляются снаружи."""

    def load(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def save(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Хранилище в памяти процесса."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


def get_db_connection():
    """Возвращает соединение с базой данных."""
    try:
        if DATABASE_URL:
            return psycopg2.connect(DATABASE_URL, cursor_factory=RealDictCursor)
        return psycopg2.connect(**DB_PARAMS, cursor_factory=RealDictCursor)
    except psycopg2.Error as e:
        logger.error(f"Ошибка подключения к базе данных: {e}")
        raise


def close_db_connection(conn):
    """Закрывает соединение с БД."""
    if conn:
        conn.close()


class PostgresStore(KeyValueStore):
    """Хранилище ключ-значение в таблице kv_store."""

    def ensure_table(self) -> None:
        conn = get_db_connection()
        try:
            with conn:
                with conn.cursor() as cur:
                    cur.execute("""
                        CREATE TABLE IF NOT EXISTS kv_store (
                            key TEXT PRIMARY KEY,
                            value TEXT NOT NULL,
                            updated_at TIMESTAMP NOT NULL
                        )
                    """)
        finally:
            close_db_connection(conn)

    def load(self, key: str) -> Optional[str]:
        conn = None
        try:
            conn = get_db_connection()
            with conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT value FROM kv_store WHERE key = %s", (key,))
                    result = cur.fetchone()
                    return result['value'] if result else None
        except psycopg2.Error as e:
            # None означает только отсутствие ключа
            logger.error(f"Ошибка чтения ключа {key}: {e}")
            raise
        finally:
            close_db_connection(conn)

    def save(self, key: str, value: str) -> None:
        conn = get_db_connection()
        try:
            with conn:
                with conn.cursor() as cur:
                    cur.execute("""
                        INSERT INTO kv_store (key, value, updated_at)
                        VALUES (%s, %s, %s)
                        ON CONFLICT (key) DO UPDATE
                        SET value = EXCLUDED.value, updated_at = EXCLUDED.updated_at
                    """, (key, value, datetime.now()))
        except psycopg2.Error as e:
            logger.error(f"Ошибка записи ключа {key}: {e}")
            raise
        finally:
            close_db_connection(conn)

    def remove(self, key: str) -> None:
        conn = get_db_connection()
        try:
            with conn:
                with conn.cursor() as cur:
                    cur.execute("DELETE FROM kv_store WHERE key = %s", (key,))
        except psycopg2.Error as e:
            logger.error(f"Ошибка удаления ключа {key}: {e}")
            raise
        finally:
            close_db_connection(conn)


def create_store() -> KeyValueStore:
    """Выбирает хранилище по переменной окружения ARTIKEL_STORAGE (memory/postgres)."""
    kind = os.environ.get("ARTIKEL_STORAGE", "memory").lower()
    if kind == "postgres":
        store = PostgresStore()
        store.ensure_table()
        logger.info("Using PostgreSQL key-value store")
        return store
    logger.info("Using in-memory key-value store")
    return MemoryStore()
