import os
from enum import StrEnum
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_UPLOAD_URL: Final[str] = "https://pro.idokep.hu/sendws.php"


class LogLevel(StrEnum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    pws_ip: str = Field(min_length=1, validation_alias="PWS_IP")
    fetch_interval: int = Field(gt=0, validation_alias="FETCH_INTERVAL")
    username: str = Field(validation_alias="USERNAME")
    password: str = Field(validation_alias="PASSWORD")

    debug_enabled: bool = Field(default=False, validation_alias="DEBUG_ENABLED")
    log_level: LogLevel = Field(default=LogLevel.INFO, validation_alias="LOG_LEVEL")
    upload_url: str = Field(default=DEFAULT_UPLOAD_URL, validation_alias="UPLOAD_URL")
    device_type: str = Field(default="WH2600", validation_alias="DEVICE_TYPE")
    http_timeout_secs: float = Field(default=10.0, gt=0, validation_alias="HTTP_TIMEOUT_SECS")

    @field_validator("fetch_interval", mode="before")
    @classmethod
    def _strict_interval(cls, value: object) -> object:
        # "10.5" or "1e3" must not be coerced into an interval
        if isinstance(value, str):
            value = value.strip()
            if not value.lstrip("+-").isdigit():
                raise ValueError(f"Invalid FETCH_INTERVAL value: {value!r}")
            return int(value)
        return value

    @property
    def effective_log_level(self) -> LogLevel:
        return LogLevel.DEBUG if self.debug_enabled else self.log_level


REQUIRED_KEYS: Final[tuple[str, ...]] = (
    "PWS_IP",
    "FETCH_INTERVAL",
    "USERNAME",
    "PASSWORD",
)

ENV_KEYS: Final[tuple[str, ...]] = (
    *REQUIRED_KEYS,
    "DEBUG_ENABLED",
    "LOG_LEVEL",
    "UPLOAD_URL",
    "DEVICE_TYPE",
    "HTTP_TIMEOUT_SECS",
)


def load_settings() -> Settings:
    # Load .env if present (does nothing if file missing)
    load_dotenv()
    data: dict[str, object] = {}
    for key in ENV_KEYS:
        if key in os.environ:
            data[key] = os.environ[key]

    # Any non-empty value switches debug on, "0" and "false" included
    data["DEBUG_ENABLED"] = bool(data.get("DEBUG_ENABLED"))
    if "LOG_LEVEL" in data:
        data["LOG_LEVEL"] = str(data["LOG_LEVEL"]).upper()

    missing = [k for k in REQUIRED_KEYS if not data.get(k)]
    if missing:
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise RuntimeError(f"Invalid configuration: {', '.join(fields)}") from e
