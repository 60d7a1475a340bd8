"""Derived meteorological values computed from a station reading.

Temperatures are in °C, humidity in %, wind speed in m/s. Every function
returns a plain number so that a zeroed reading still yields a value.
"""

import math
from typing import Final

_COMPASS_POINTS: Final[tuple[str, ...]] = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)

# Magnus coefficients (Alduchov & Eskridge 1996)
MAGNUS_B: Final[float] = 17.625
MAGNUS_C: Final[float] = 243.04

# Rothfusz regression, NWS Technical Attachment SR 90-23, in °F and %
_ROTHFUSZ: Final[tuple[float, ...]] = (
    -42.379, 2.04901523, 10.14333127, -0.22475541, -6.83783e-3,
    -5.481717e-2, 1.22874e-3, 8.5282e-4, -1.99e-6,
)


def winddir_text(degrees: float) -> str:
    """16 point compass name for a bearing in degrees, any range."""
    sector = math.floor((degrees % 360.0) / 22.5 + 0.5)
    return _COMPASS_POINTS[sector % 16]


def dew_point(temp: float, hum: float) -> float:
    """Dew point from the Magnus approximation; 0 when humidity is unknown."""
    if hum <= 0:
        return 0.0
    alpha = math.log(min(hum, 100.0) / 100.0) + MAGNUS_B * temp / (MAGNUS_C + temp)
    return MAGNUS_C * alpha / (MAGNUS_B - alpha)


def wind_chill(temp: float, wind: float) -> float:
    """Environment Canada / NWS 2001 wind chill index.

    Only defined at or below 10 °C with wind above 4.8 km/h; outside that
    range the air temperature is returned.
    """
    speed_kmh = wind * 3.6
    if temp > 10.0 or speed_kmh <= 4.8:
        return temp
    v = speed_kmh ** 0.16
    return min(temp, 13.12 + 0.6215 * temp - 11.37 * v + 0.3965 * temp * v)


def heat_index(temp: float, humidity: float) -> float:
    """NWS heat index (Rothfusz regression), returned in °C.

    The regression only holds from 26.7 °C (80 °F), 40 % RH and a 12 °C dew
    point upward; below that the air temperature is returned.
    """
    if temp < 26.7 or humidity < 40 or dew_point(temp, humidity) < 12.0:
        return temp
    t = temp * 9.0 / 5.0 + 32.0
    rh = humidity
    terms = (1.0, t, rh, t * rh, t * t, rh * rh, t * t * rh, t * rh * rh, t * t * rh * rh)
    hi_f = sum(c * x for c, x in zip(_ROTHFUSZ, terms))
    return (hi_f - 32.0) * 5.0 / 9.0
