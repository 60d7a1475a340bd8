import math
from typing import Final

from bs4 import BeautifulSoup, Tag

from .models import Reading

# Row index within a livedata.htm table -> Reading field. The station page
# layout is fixed by the firmware, so these positions must not move.
ROW_FIELDS: Final[dict[int, str]] = {
    8: "receiver_time",
    12: "temperature_indoor",
    13: "humidity_indoor",
    14: "pressure_absolute",
    15: "pressure_relative",
    16: "temperature",
    17: "humidity",
    18: "wind_dir",
    19: "wind_speed",
    20: "wind_gust",
    21: "solar_radiation",
    22: "uv",
    23: "uvi",
    24: "precip_hourly_rate",
    25: "precip_daily",
    26: "precip_weekly",
    27: "precip_monthly",
    28: "precip_yearly",
}

TEXT_FIELDS: Final[frozenset[str]] = frozenset({"receiver_time"})


def parse_float(value: str) -> float:
    """Best-effort float; anything unusable (e.g. "--.-") reads as 0."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    return result if math.isfinite(result) else 0.0


def _row_input_value(row: Tag) -> str:
    """Value of the first <input> in the row's own cells, or ""."""
    for cell in row.find_all(["td", "th"], recursive=False):
        field_input = cell.find("input")
        if field_input is not None:
            raw = field_input.get("value", "")
            return raw if isinstance(raw, str) else " ".join(raw)
    return ""


def extract_values(html: str) -> dict[str, str]:
    """Map field name -> raw input value for every known row index."""
    # html5lib closes the <td>/<tr> tags the station firmware leaves open
    soup = BeautifulSoup(html, "html5lib")
    values: dict[str, str] = {}
    for table in soup.find_all("table"):
        for index, row in enumerate(table.find_all("tr")):
            field = ROW_FIELDS.get(index)
            if field is None:
                continue
            values[field] = _row_input_value(row)
    return values


def extract_reading(html: str) -> Reading:
    data: dict[str, str | float] = {}
    for field, raw in extract_values(html).items():
        data[field] = raw if field in TEXT_FIELDS else parse_float(raw)
    return Reading.model_validate(data)
