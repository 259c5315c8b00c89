import logging
from logging.handlers import RotatingFileHandler
from mt.common.setup import PATHS
from datetime import datetime

LOG_NAME = "momenttimer"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Size cap and rollover count for the long-lived log file.
PERSISTENT_MAX_BYTES = 1024 * 1024
PERSISTENT_BACKUPS = 3


# Adds a handler under a stable name, unless one with that name is already attached.
def _attach(logger, handler_name, make_handler, level, fmt):
    if any(h.get_name() == handler_name for h in logger.handlers):
        return
    handler = make_handler()
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.set_name(handler_name)
    logger.addHandler(handler)

# Keeps only the newest `keep` per-run debug logs.
def _prune_debug_runs(debug_dir, name, keep):
    runs = sorted(debug_dir.glob(f"{name}_*.log"), key=lambda p: p.stat().st_mtime, reverse=True)
    for run in runs[keep:]:
        try:
            run.unlink()
        except OSError:
            continue

def get_logger(name=LOG_NAME, level=logging.INFO, console=False, debug_runs: int = 10) -> logging.Logger:
    """Returns the app logger, wiring its file handlers on first use.

    Three files live under PATHS.logs: ``<name>.log`` (INFO and up, rotated),
    ``latest.log`` (this run only) and ``debug/<name>_<stamp>.log`` (one per run,
    the newest ``debug_runs`` kept). All of them open lazily on the first record.
    """
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level)

    log_dir = PATHS.logs
    fmt = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    _attach(logger, f"{name}:persistent", lambda: RotatingFileHandler(
        log_dir / f"{name}.log",
        maxBytes=PERSISTENT_MAX_BYTES,
        backupCount=PERSISTENT_BACKUPS,
        encoding="utf-8",
        delay=True,
    ), logging.INFO, fmt)

    _attach(logger, f"{name}:latest", lambda: logging.FileHandler(
        log_dir / "latest.log", mode="w", encoding="utf-8", delay=True,
    ), level, fmt)

    if debug_runs > 0 and not any(h.get_name() == f"{name}:debug" for h in logger.handlers):
        debug_dir = log_dir / "debug"
        debug_dir.mkdir(parents=True, exist_ok=True)
        run_path = debug_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
        _attach(logger, f"{name}:debug", lambda: logging.FileHandler(
            run_path, encoding="utf-8", delay=True,
        ), logging.DEBUG, fmt)
        _prune_debug_runs(debug_dir, name, debug_runs)

    if console:
        _attach(logger, f"{name}:console", logging.StreamHandler, level, fmt)

    return logger

log = get_logger(level=logging.DEBUG)
