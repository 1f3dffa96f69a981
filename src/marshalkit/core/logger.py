import logging
import sys


class _MarshalkitFilter(logging.Filter):
    """Marks handlers installed by configure_root_logger."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure root logger and marshalkit-specific logger.

    Root logger stays at WARNING so library noise is suppressed.
    Only marshalkit namespace logs are set to the requested level.

    Args:
        level: Log level for marshalkit logs (DEBUG, INFO, WARNING, ERROR).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _MarshalkitFilter) for f in h.filters):
            # Already configured; just update marshalkit logger level
            logging.getLogger("marshalkit").setLevel(_level(level))
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_MarshalkitFilter())
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("marshalkit").setLevel(_level(level))


def get_logger(name: str = "marshalkit", level: str = "INFO") -> logging.Logger:
    """
    Get a module-specific logger writing through the shared root handler.
    """
    configure_root_logger(level)
    return logging.getLogger(name)
