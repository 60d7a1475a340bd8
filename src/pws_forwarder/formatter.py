from datetime import datetime

from .models import Reading


def build_query(
    reading: Reading,
    now: datetime,
    username: str,
    password: str,
    device_type: str = "WH2600",
) -> str:
    """Build the sendws.php query string.

    Key names and decimal places are what the receiving service expects;
    values are inserted as-is, without URL escaping.
    """
    pairs = [
        f"user={username}",
        f"pass={password}",
        f"ev={now.year}",
        f"ho={now.month}",
        f"nap={now.day}",
        f"ora={now.hour}",
        f"perc={now.minute}",
        f"mp={now.second}",
        f"hom={reading.temperature:.1f}",
        f"rh={reading.humidity:.0f}",
        f"szelirany={reading.wind_dir:.0f}",
        f"szelero={reading.wind_speed:.1f}",
        f"szellokes={reading.wind_gust:.1f}",
        f"p={reading.pressure_relative:.1f}",
        f"csap={reading.precip_daily:.2f}",
        f"csap1h={reading.precip_hourly_rate:.2f}",
        f"tipus={device_type}",
    ]
    return "&".join(pairs)
