import logging
import signal
import sys
import threading
from types import FrameType

from .config import load_settings
from .scheduler import run_scheduler


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _install_signal_handlers(stop: threading.Event) -> None:
    def _handle(signum: int, _frame: FrameType | None) -> None:
        logging.info("Received signal %s, shutting down", signal.Signals(signum).name)
        stop.set()

    signal.signal(signal.SIGINT, _handle)
    signal.signal(signal.SIGTERM, _handle)


def main() -> int:
    try:
        settings = load_settings()
    except RuntimeError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    _setup_logging(settings.effective_log_level)

    stop = threading.Event()
    _install_signal_handlers(stop)
    run_scheduler(settings, stop_event=stop)
    return 0


if __name__ == "__main__":
    sys.exit(main())
