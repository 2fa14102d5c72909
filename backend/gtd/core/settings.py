"""Application settings and configuration utilities."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Immutable application settings derived from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "GTD")
    version: str = os.getenv("PROJECT_VERSION", "0.1.0")
    environment: str = os.getenv("ENVIRONMENT", "local")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Storage backend: "memory" or "sql"
    task_store: str = os.getenv("TASK_STORE", "memory")
    use_postgres: bool = _env_flag("USE_POSTGRES")
    database_url: str | None = os.getenv("DATABASE_URL")
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "5"))

    # PostgreSQL connection parts, used when DATABASE_URL is not set
    db_host: str = os.getenv("DB_HOST", "localhost")
    db_port: str = os.getenv("DB_PORT", "5432")
    db_user: str = os.getenv("DB_USER", "postgres")
    db_password: str = os.getenv("DB_PASSWORD", "postgres")
    db_name: str = os.getenv("DB_NAME", "gtd")
    db_ssl_mode: str = os.getenv("DB_SSL_MODE", "disable")

    # Sample data for the in-memory store
    seed_sample_tasks: bool = _env_flag("SEED_SAMPLE_TASKS", "true")
    sample_owner_id: str = os.getenv("SAMPLE_OWNER_ID", "sample-user-123")

    @property
    def database_path(self) -> str:
        """Return path to SQLite database file."""
        db_path = os.getenv("DATABASE_PATH")
        if db_path:
            return db_path
        # Default: gtd.db in backend directory
        backend_dir = Path(__file__).parent.parent.parent
        return str(backend_dir / "gtd.db")

    @property
    def postgres_url(self) -> str:
        """Return the PostgreSQL URL assembled from the DB_* variables."""
        return (
            f"postgresql+psycopg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?sslmode={self.db_ssl_mode}"
        )

    @property
    def database_url_resolved(self) -> str:
        """Return the SQLAlchemy URL the sql store should connect to."""
        if self.database_url:
            return self.database_url
        if self.use_postgres:
            return self.postgres_url
        return f"sqlite:///{self.database_path}"

    @property
    def uses_sql_store(self) -> bool:
        return self.use_postgres or self.task_store.lower() == "sql"


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
