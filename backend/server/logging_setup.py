import logging
import sys

_APP_LOGGERS = ("server", "auth", "brain", "tasks")


class _ThirdPartyFilter(logging.Filter):
    """Let app loggers through; third-party loggers only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.split(".", 1)[0] in _APP_LOGGERS:
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once, early in startup."""
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    handler.addFilter(_ThirdPartyFilter())
    root.addHandler(handler)
