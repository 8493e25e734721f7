import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Configure the root logger for a harness run.

    Always logs to stderr; when ``log_file`` is given, the file is truncated
    and receives the same records.
    """
    root = logging.getLogger()

    # Close file handlers left over from a previous run before truncating
    for handler in root.handlers[:]:
        if isinstance(handler, logging.FileHandler):
            handler.close()
            root.removeHandler(handler)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        if os.path.exists(log_file):
            try:
                os.remove(log_file)
            except PermissionError:
                print(f"Warning: Could not remove log file {log_file} - file is in use")
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler) and handler.stream == sys.stderr:
            try:
                if hasattr(handler.stream, "reconfigure"):
                    handler.stream.reconfigure(encoding="utf-8", errors="replace")
            except Exception:
                # Emoji may render as replacement characters on odd consoles
                pass

    return logging.getLogger(__name__)
