from pathlib import Path
from typing import Literal, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bambu_cloud.schemas.region import Region


class Settings(BaseSettings):

    # ---- account ----
    region: Region = Region.Other
    email: Optional[str] = None
    password: Optional[SecretStr] = None

    # ---- app/runtime ----
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    verify_ssl: bool = True

    # ---- http ----
    request_timeout: float = 10.0
    total_retries: int = 3
    backoff_factor: float = 1.0
    tasks_limit: int = 500  # page size the cloud accepts for the task list

    # ---- exports ----
    out_dir: Path = Path("data") / "exports"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BAMBU_",    # BAMBU_REGION, BAMBU_EMAIL, etc.
        env_nested_delimiter='__',
        extra="ignore"
    )

    @field_validator("region", mode="before")
    @classmethod
    def _parse_region(cls, value):
        if isinstance(value, str):
            return Region.parse(value)
        return value

    @property
    def has_credentials(self) -> bool:
        return bool(self.email) and bool(self.password and self.password.get_secret_value())


def get_settings() -> Settings:
    """Accessor so callers never build Settings by hand."""
    return Settings()
