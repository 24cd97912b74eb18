"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables in deployment (defaults are for local use)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SQLite file by default: works out-of-the-box without a database server
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./aurapass.sqlite"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    auto_create_tables: bool = True

    # Credentials
    jwt_secret: str = "aurapass-dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 12 * 60

    # Identifiers
    student_gid_prefix: str = "Aurapass-YCP"
    first_event_id: int = 101
    identifier_max_attempts: int = 5

    # Bootstrap records
    bootstrap_admin_gid: str = "Organizer"
    bootstrap_admin_password: str = "Admin"
    bootstrap_admin_name: str = "Admin User"
    bootstrap_student_gid: str = "DKTE-STU-0001"
    bootstrap_student_password: str = "456"
    bootstrap_student_name: str = "Aarav Kulkarni"
    bootstrap_student_email: str = "aarav@student.com"
    bootstrap_student_phone: str = "9876543210"

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
