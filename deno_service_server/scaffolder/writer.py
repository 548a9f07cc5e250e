"""Filesystem writer for generated files.

Writes are best-effort and non-transactional: files written before a
failure are left in place.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path

from deno_service_server.errors import WriteError

logger = logging.getLogger(__name__)


async def materialize(base_dir: str | Path, files: Mapping[str, str]) -> list[Path]:
    """Create *base_dir* (recursively) and write every file into it.

    Existing files are overwritten.  Files are written one after another, in
    mapping order, off the event loop.

    Args:
        base_dir: Directory receiving the files.
        files: Mapping of path relative to *base_dir* -> text content.

    Returns:
        The written file paths, in order.

    Raises:
        WriteError: If the directory or any file cannot be written.  Carries
            the underlying OS error message.
    """
    root = Path(base_dir)
    try:
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(str(root), str(exc)) from exc

    written: list[Path] = []
    for rel_path, content in files.items():
        target = root / rel_path
        try:
            await asyncio.to_thread(_write_file, target, content)
        except OSError as exc:
            raise WriteError(str(target), str(exc)) from exc
        logger.debug("Wrote %s (%d bytes)", target, len(content))
        written.append(target)
    return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")

