"""Application settings loaded from the environment or a .env file."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from compound_interest.schemas.calculation import DEFAULT_FX_RATE, DEFAULT_TAX_RATE


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="INTEREST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "compound-interest"
    log_level: str = Field(default="INFO", description="Logging level")
    allowed_origins: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173",
        description="Allowed CORS origins (comma-separated)",
    )

    history_max_items: int = Field(default=20, ge=1)
    history_path: Optional[str] = Field(
        default=None,
        description="JSON file backing the history list; memory only when unset",
    )

    # caller-side defaults; the engine itself never substitutes them
    default_tax_rate: float = Field(default=DEFAULT_TAX_RATE, ge=0, le=100)
    default_fx_rate: float = Field(default=DEFAULT_FX_RATE, gt=0)

    @property
    def cors_origins(self) -> List[str]:
        """Parse origins from the comma-separated string"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
