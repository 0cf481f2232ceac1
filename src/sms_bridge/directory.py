from __future__ import annotations

import json
import logging
from collections.abc import Mapping, MutableMapping
from pathlib import Path

from .errors import DirectoryFileError, DirectoryParseError

logger = logging.getLogger(__name__)

Directory = dict[str, str]


def load_directory(path: str | Path) -> Directory:
    """
    Read the whole phone -> name mapping from a JSON file.

    The file must hold a single JSON object whose keys and values are strings:

      {"+15551230001": "Alice", "+15551230002": "Bob"}
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DirectoryFileError(path, f"could not read directory file ({e})") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DirectoryParseError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise DirectoryParseError(path, f"expected a JSON object, got {type(data).__name__}")

    directory: Directory = {}
    for phone, name in data.items():
        if not isinstance(name, str):
            raise DirectoryParseError(path, f"name for {phone} is not a string")
        directory[phone] = name

    logger.debug("Loaded %d directory entries from %s", len(directory), path)
    return directory


def save_directory(path: str | Path, directory: Mapping[str, str]) -> None:
    """
    Overwrite the directory file with the whole mapping.

    Written in place: no temp file, no backup. Last writer wins.
    """
    path = Path(path)
    payload = json.dumps(dict(directory), indent=2, sort_keys=True, ensure_ascii=False)
    try:
        path.write_text(payload + "\n", encoding="utf-8")
    except OSError as e:
        raise DirectoryFileError(path, f"could not write directory file ({e})") from e
    logger.debug("Saved %d directory entries to %s", len(directory), path)


def lookup(directory: Mapping[str, str], phone: str) -> str | None:
    return directory.get(phone)


def add_person(directory: MutableMapping[str, str], name: str, phone: str) -> None:
    """Insert or overwrite phone -> name."""
    previous = directory.get(phone)
    if previous is not None and previous != name:
        logger.info("Replacing %s for %s with %s", previous, phone, name)
    directory[phone] = name


def remove_person(directory: MutableMapping[str, str], name: str) -> list[str]:
    """
    Remove every entry whose name equals `name`.

    Entries are keyed by phone but removed by name, so this scans the values.
    All numbers registered under the name go. Returns the removed numbers.
    """
    removed = [phone for phone, entry_name in directory.items() if entry_name == name]
    for phone in removed:
        del directory[phone]
    return removed
