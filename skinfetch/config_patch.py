from __future__ import annotations

"""
Splice record text into the target config.

This is a textual patch, not a JSON merge: the records are inserted right
after the first ``"Items": [`` marker so they become the head of that list.
"""

import shutil
from pathlib import Path

from loguru import logger

from .config import BACKUP_SUFFIX, ITEMS_MARKER
from .errors import ConfigMarkerError


def insert_records(config_text: str, records: str) -> str:
    text = config_text + "\n"
    pos = text.find(ITEMS_MARKER)
    if pos < 0:
        raise ConfigMarkerError(f"Config has no {ITEMS_MARKER!r} marker")
    pos += len(ITEMS_MARKER)
    return text[:pos] + records + text[pos:]


def backup_config(path: Path) -> Path:
    backup = path.with_name(path.name + BACKUP_SUFFIX)
    logger.info("Making config backup: {}", backup)
    shutil.copyfile(path, backup)
    return backup


def patch_config_file(path: Path, records: str) -> Path:
    """Back up ``path`` then write it back with ``records`` inserted."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    text = path.read_text(encoding="utf-8")
    # Fail before touching anything if the marker is missing
    patched = insert_records(text, records)

    backup_config(path)
    logger.info("Saving config: {}", path)
    path.write_text(patched, encoding="utf-8")
    return path
