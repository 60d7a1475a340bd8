import logging
import threading
from collections.abc import Callable
from datetime import datetime

from .config import Settings
from .extractor import extract_reading
from .fetcher import fetch_document
from .formatter import build_query
from .uploader import upload


def run_cycle(settings: Settings, now_func: Callable[[], datetime] = datetime.now) -> bool:
    """Fetch, extract, format and upload one reading. Returns upload success."""
    html = fetch_document(settings.pws_ip, timeout=settings.http_timeout_secs)
    if html is None:
        return False

    try:
        reading = extract_reading(html)
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            logging.debug("Reading: %s", reading.model_dump())
        query = build_query(
            reading,
            now_func(),
            username=settings.username,
            password=settings.password,
            device_type=settings.device_type,
        )
    except Exception:
        # A page we cannot handle must not stop the loop
        logging.exception("Failed to process PWS data")
        return False

    return upload(query, url=settings.upload_url, timeout=settings.http_timeout_secs)


def run_scheduler(
    settings: Settings,
    stop_event: threading.Event | None = None,
    now_func: Callable[[], datetime] = datetime.now,
) -> None:
    """Run cycles every fetch_interval seconds until stop_event is set."""
    stop = stop_event if stop_event is not None else threading.Event()
    logging.info(
        "Forwarder starting: station=%s, interval=%ss, endpoint=%s",
        settings.pws_ip,
        settings.fetch_interval,
        settings.upload_url,
    )

    while not stop.is_set():
        if run_cycle(settings, now_func=now_func):
            logging.info("Reading forwarded")
        stop.wait(settings.fetch_interval)

    logging.info("Forwarder stopped")
