from typing import Any

import requests

# Labels of the first 29 rows of a WH2600 livedata.htm table
ROW_LABELS: tuple[str, ...] = (
    "Station Settings",
    "Receiver",
    "Firmware",
    "Indoor ID",
    "Outdoor ID 1",
    "Outdoor ID 2",
    "Outdoor ID 3",
    "Live Data",
    "Receiver Time",
    "Indoor Sensor ID",
    "Outdoor Sensor ID",
    "Battery",
    "Indoor Temperature",
    "Indoor Humidity",
    "Absolute Pressure",
    "Relative Pressure",
    "Outdoor Temperature",
    "Outdoor Humidity",
    "Wind Direction",
    "Wind Speed",
    "Wind Gust",
    "Solar Radiation",
    "UV",
    "UVI",
    "Hourly Rain Rate",
    "Daily Rain",
    "Weekly Rain",
    "Monthly Rain",
    "Yearly Rain",
)

DEFAULT_VALUES: dict[int, str] = {
    8: "14:05 03/21/2024",
    12: "22.3",
    13: "41",
    14: "1002.4",
    15: "1015.8",
    16: "12.7",
    17: "73",
    18: "225",
    19: "3.4",
    20: "5.8",
    21: "312.45",
    22: "1890",
    23: "3",
    24: "0.30",
    25: "1.20",
    26: "8.40",
    27: "21.90",
    28: "312.60",
}


def make_livedata(values: dict[int, str] | None = None) -> str:
    """Render a livedata.htm-like page; rows without a value get no <input>."""
    values = DEFAULT_VALUES if values is None else values
    rows = []
    for index, label in enumerate(ROW_LABELS):
        cell = f'<td><div class="item_1">{label}</div></td>'
        if index in values:
            cell += f'<td><input name="row{index}" type="text" class="item_2" value="{values[index]}" maxlength="8"></td>'
        rows.append(f"<tr>{cell}</tr>")
    return (
        "<html><head><title>Live Data</title></head><body>"
        '<form name="form1" method="post"><table border="0">'
        + "".join(rows)
        + "</table></form></body></html>"
    )


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text
        self.closed = False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *_args: Any) -> None:
        self.closed = True




def make_livedata_unclosed(values: dict[int, str] | None = None) -> str:
    """Same page, but with </td> and </tr> left out as station firmware does."""
    values = DEFAULT_VALUES if values is None else values
    rows = []
    for index, label in enumerate(ROW_LABELS):
        row = f'<tr><td><div class="item_1">{label}</div>'
        if index in values:
            row += f'<td><input name="row{index}" type="text" class="item_2" value="{values[index]}" maxlength="8">'
        rows.append(row)
    return (
        "<!DOCTYPE html><html><head><title>Live Data</title></head><body>"
        '<form name="form1" method="post"><table border="0">'
        + "".join(rows)
        + "</table></form></body></html>"
    )
