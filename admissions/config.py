"""Application Configuration"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "College Admissions Backend"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    API_V1_PREFIX: str = "/api/v1"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database
    DATABASE_URL: str
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600

    # Admissions
    # Enrollment numbers carry a 3-digit sequence, so a partition can never hold more than 999
    ENROLLMENT_PARTITION_CAPACITY: int = 999
    MIN_ADMISSION_YEAR: int = 2020
    MIN_PASSOUT_YEAR: int = 2021

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("ENROLLMENT_PARTITION_CAPACITY")
    @classmethod
    def check_partition_capacity(cls, v: int) -> int:
        """Capacity must fit the 3-digit sequence of an enrollment number"""
        if not 1 <= v <= 999:
            raise ValueError("ENROLLMENT_PARTITION_CAPACITY must be between 1 and 999")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_sqlite(self) -> bool:
        """SQLite is only used for local runs and the test suite"""
        return self.DATABASE_URL.startswith("sqlite")


# Global settings instance
settings = Settings()
