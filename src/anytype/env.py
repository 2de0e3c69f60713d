import json
import logging
import sys

LOG = logging.getLogger("anytype")
LOG.addHandler(logging.NullHandler())


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str | int = "WARNING", fmt: str = "text") -> None:
    """Install a single stderr handler on the package logger.

    Calling it again replaces the previous handler, so the CLI can
    reconfigure after loading the config file.
    """
    if fmt not in ("text", "json"):
        raise ValueError(f"unknown logging format: {fmt!r}")
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    for old in list(LOG.handlers):
        LOG.removeHandler(old)
    LOG.addHandler(handler)
    LOG.setLevel(level.upper() if isinstance(level, str) else level)
    LOG.propagate = False
