"""Error reporting helpers for service calls."""
import logging
import threading
from typing import Any, Protocol

logger = logging.getLogger(__name__)

DEFAULT_SINK_NAME = "service_fetch.errors"

_sink_lock = threading.Lock()


class ErrorSink(Protocol):
    """Anything that can record an error-shaped diagnostic payload.

    A ``logging.Logger`` satisfies this out of the box.
    """

    def error(self, payload: Any) -> None:
        ...


def get_default_sink(name: str = DEFAULT_SINK_NAME, level: str = "ERROR") -> logging.Logger:
    """Return the named logger, wiring a stderr handler on first use."""
    sink = logging.getLogger(name)
    with _sink_lock:
        if not sink.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
            sink.addHandler(handler)
            sink.propagate = False
            if sink.level == logging.NOTSET:
                sink.setLevel(level.upper())
    return sink


class ErrorHandler:
    def __init__(self, sink: ErrorSink) -> None:
        self.sink = sink

    def report(self, output: Any) -> None:
        logger.debug("Service reported an error, forwarding diagnostic payload to sink")
        self.sink.error(output)
