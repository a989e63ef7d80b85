"""Artifact writing."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import stat
import tempfile

logger = logging.getLogger(__name__)


def _target_mode(path: Path) -> int:
    # Keep the mode of an existing file; new files get the umask default
    if path.is_file():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_output(path: str | Path, text: str) -> bool:
    """Write an artifact atomically, skipping unchanged content.

    Leaving an identical file untouched keeps its mtime stable, so build
    systems do not recompile consumers of an unchanged artifact. A rewritten
    file keeps its previous permissions.

    Args:
        path: Destination file
        text: Artifact text

    Returns:
        True if the file was written, False if it was already up to date
    """
    path = Path(path)
    data = text.encode("utf-8")

    if path.is_file() and path.read_bytes() == data:
        logger.debug(f"Up to date: {path}")
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info(f"Wrote {path}")
    return True


def is_up_to_date(path: str | Path, text: str) -> bool:
    """Check whether a file on disk already holds exactly this text."""
    path = Path(path)
    return path.is_file() and path.read_bytes() == text.encode("utf-8")
