from zoneinfo import ZoneInfo

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from forumkit import ENV_FILE_PATH


class SettingsManager(BaseSettings):
    debug_mode: bool = Field(default=False)
    trace_mode: bool = Field(default=False)
    log_time_zone: ZoneInfo = Field(default=ZoneInfo("UTC"))
    log_date_format: str = Field(default="%Y-%m-%d %H:%M:%S")

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        env_prefix="FORUMKIT_",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_time_zone", mode="before")
    @classmethod
    def normalize_log_time_zone(cls, v):
        if v is None or (isinstance(v, str) and v.strip() == ""):
            return ZoneInfo("UTC")

        return ZoneInfo(v.strip()) if isinstance(v, str) else v

    @field_validator("log_date_format")
    @classmethod
    def log_date_format_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("log_date_format cannot be empty")

        return v


settings = SettingsManager() # type: ignore
