import logging

import requests


def livedata_url(host: str) -> str:
    return f"http://{host}/livedata.htm"


def fetch_document(host: str, timeout: float) -> str | None:
    """GET the station's live data page.

    Returns None when nothing usable came back; the caller skips the cycle.
    """
    url = livedata_url(host)
    try:
        with requests.get(url, timeout=timeout) as resp:
            resp.raise_for_status()
            html = resp.text
    except requests.RequestException as exc:
        logging.warning("Failed to fetch data from PWS at %s: %s", url, exc)
        return None

    logging.debug("Fetched data from PWS (%s characters)", len(html))
    return html
