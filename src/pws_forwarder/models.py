from datetime import datetime

from pydantic import BaseModel, computed_field

from . import conversions

# Format of the receiver clock shown on livedata.htm, e.g. "14:05 03/21/2024"
RECEIVER_TIME_FORMAT = "%H:%M %m/%d/%Y"


def parse_receiver_time(value: str) -> int:
    """Return epoch seconds for the station's local receiver time, or 0."""
    try:
        return int(datetime.strptime(value.strip(), RECEIVER_TIME_FORMAT).timestamp())
    except (ValueError, OverflowError, OSError):
        return 0


class Reading(BaseModel):
    """One snapshot of the station's live data page."""

    receiver_time: str = ""
    temperature_indoor: float = 0.0
    humidity_indoor: float = 0.0
    pressure_absolute: float = 0.0
    pressure_relative: float = 0.0
    temperature: float = 0.0
    humidity: float = 0.0
    wind_dir: float = 0.0
    wind_speed: float = 0.0
    wind_gust: float = 0.0
    solar_radiation: float = 0.0
    uv: float = 0.0
    uvi: float = 0.0
    precip_hourly_rate: float = 0.0
    precip_daily: float = 0.0
    precip_weekly: float = 0.0
    precip_monthly: float = 0.0
    precip_yearly: float = 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def receiver_timestamp(self) -> int:
        return parse_receiver_time(self.receiver_time)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def dew_point(self) -> float:
        return conversions.dew_point(self.temperature, self.humidity)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def wind_dir_cardinal(self) -> str:
        return conversions.winddir_text(self.wind_dir)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def wind_chill(self) -> float:
        return conversions.wind_chill(self.temperature, self.wind_speed)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def heat_index(self) -> float:
        return conversions.heat_index(self.temperature, self.humidity)
