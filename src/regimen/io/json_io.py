"""File helpers shared by the catalog, config and findings loaders and the report writer."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from regimen.constants.reporting import RECOMMENDATIONS_TEMP_PREFIX, RECOMMENDATIONS_TEMP_SUFFIX
from regimen.exceptions import FindingsParseError, RegimenError


def read_text_file(path: Path, *, kind: str, error: type[RegimenError]) -> str:
    """Read a UTF-8 file, raising *error* when it is missing or unreadable.

    *kind* names the document in messages, e.g. ``"Catalog"``.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise error(f"{kind} file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise error(f"Cannot read {kind.lower()} file {path}: {exc}") from exc


def load_json_file(
    path: Path,
    *,
    kind: str = "Findings",
    error: type[RegimenError] = FindingsParseError,
) -> object:
    """Load and parse a JSON document, reporting every failure as *error*."""
    text = read_text_file(path, kind=kind, error=error)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise error(f"Invalid JSON in {kind.lower()} file {path}: {exc}") from exc


def write_json_atomic(
    path: Path,
    payload: object,
    *,
    temp_prefix: str = RECOMMENDATIONS_TEMP_PREFIX,
    temp_suffix: str = RECOMMENDATIONS_TEMP_SUFFIX,
) -> None:
    """Write *payload* as indented, key-sorted JSON, swapping it into place with one rename.

    The payload is serialised before any file is created. A failed write
    removes the temporary file and leaves an existing *path* untouched.
    """
    text = json.dumps(payload, indent=2, sort_keys=True) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(temp_name, path)
    except Exception:
        with suppress(FileNotFoundError):
            Path(temp_name).unlink()
        raise
