"""Centralized logging setup helper used by the runners and tests.

Call it before importing modules that may configure logging themselves
(matplotlib in the benchmark visualizer, for instance).
"""
import logging
import sys
import os
import datetime

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(filename)s:%(lineno)d %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"
RUN_FORMAT = "%(asctime)s [%(levelname)-7s] %(filename)s:%(lineno)d %(message)s"


def ensure_logging(level: int = logging.INFO, *, force: bool = False) -> None:
    """Ensure the root logger is configured with a StreamHandler to stdout.

    - If the root logger has no handlers, configure one via basicConfig.
    - If handlers exist and `force` is True, reconfigure.
    - Otherwise, set the root logger level to `level` without replacing handlers.

    This is safe to call multiple times.
    """
    root = logging.getLogger()
    if force or not root.handlers:
        logging.basicConfig(level=level, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT, stream=sys.stdout, force=force)
    else:
        root.setLevel(level)


def configure_debug(debug: bool) -> None:
    """Convenience wrapper to set DEBUG level when requested."""
    ensure_logging(logging.DEBUG if debug else logging.INFO)


def _sanitize_filename(name: str) -> str:
    return "".join(c if c.isalnum() or c in "._-" else "_" for c in str(name))


def configure_run_logging(run_tag: str, *, log_dir: str = "results/logs",
                          console_level: int = logging.INFO, file_level: int = logging.DEBUG,
                          force: bool = False) -> str:
    """Configure logging for a batch run.

    - Ensures a console StreamHandler exists (INFO by default).
    - Adds a per-run file handler named after `run_tag` and a timestamp.
    - Returns the absolute path to the logfile created.

    If `force` is True the root handlers will be replaced.
    """
    ensure_logging(level=console_level, force=force)

    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger("matplotlib.font_manager").setLevel(logging.WARNING)

    os.makedirs(log_dir, exist_ok=True)

    safe_tag = _sanitize_filename((run_tag or "run").lower())
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    logfile = os.path.join(log_dir, f"{safe_tag}_{timestamp}.log")

    root = logging.getLogger()

    # Reuse a file handler already writing for this run tag
    if not force:
        for h in root.handlers:
            if isinstance(h, logging.FileHandler) and safe_tag in os.path.basename(h.baseFilename):
                return os.path.abspath(h.baseFilename)

    formatter = logging.Formatter(RUN_FORMAT, datefmt=DEFAULT_DATEFMT)

    console_exists = any(
        isinstance(h, logging.StreamHandler) and getattr(h, 'stream', None) is sys.stdout
        for h in root.handlers
    )
    if force:
        # basicConfig above installed a plain stdout handler; switch it to the run format
        for h in root.handlers:
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
                h.setLevel(console_level)
                h.setFormatter(formatter)
    elif not console_exists:
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(console_level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

    fh = logging.FileHandler(logfile, mode='a', encoding='utf-8')
    fh.setLevel(file_level)
    fh.setFormatter(formatter)
    root.addHandler(fh)

    # Root level is the lower of console/file so the file captures debug
    root.setLevel(min(console_level, file_level))

    return os.path.abspath(logfile)
