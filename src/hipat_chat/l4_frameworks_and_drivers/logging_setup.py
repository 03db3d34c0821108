"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FILENAME = 'hipat_debug.log'


def setup_file_logging(output_dir: Path) -> Path:
    """Send the ``hipat`` logger tree to a debug file in *output_dir*. Returns the log path.

    Calling again replaces the previous file handler instead of stacking a second one.
    """
    log_path = output_dir / LOG_FILENAME
    root = logging.getLogger('hipat')
    for existing in list(root.handlers):
        if isinstance(existing, logging.FileHandler) and getattr(existing, '_hipat', False):
            root.removeHandler(existing)
            existing.close()

    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    handler._hipat = True  # type: ignore[attr-defined]
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    logging.getLogger('hipat.app').info('Debug logging started → %s', log_path)
    return log_path
