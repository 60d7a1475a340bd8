import logging

import requests

from .config import DEFAULT_UPLOAD_URL


def upload(query: str, url: str = DEFAULT_UPLOAD_URL, timeout: float = 10.0) -> bool:
    headers = {"Content-Type": "application/json"}
    try:
        with requests.post(f"{url}?{query}", headers=headers, timeout=timeout) as resp:
            code = int(resp.status_code)
    except requests.RequestException as exc:
        logging.warning("Error posting reading: %s", exc)
        return False

    logging.debug("Upload response status: %s", code)
    if not (200 <= code < 300):
        logging.warning("Upload rejected: HTTP status %s", code)
        return False
    return True
