import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """Keep our own records; let third-party loggers through only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasktracker" or record.name.startswith("tasktracker."):
            return True
        # uvicorn access/startup lines are useful on the console
        if record.name.startswith("uvicorn"):
            return record.levelno >= logging.INFO
        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    level: int | str = logging.INFO,
    log_dir: str | Path | None = None,
) -> None:
    """Configure the root logger: filtered stderr console, optional full log file.

    Call once, before the first log line.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "tasktracker.log"), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
