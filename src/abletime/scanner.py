"""Discover project files in a directory and estimate time spent on them."""

from __future__ import annotations

import functools
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Union

from .engine import calculate_time_spent, max_gap_from_minutes
from .models import ProjectFile
from .versioning import extract_version

logger = logging.getLogger(__name__)


def collect_project_files(directory: Union[str, Path], suffix: str) -> list[ProjectFile]:
    """Build project files for ``directory`` sorted by creation time.

    Only regular files directly inside ``directory`` whose names end with
    ``suffix`` are included. Any ``OSError`` raised while listing the
    directory or reading file metadata is propagated.
    """
    directory = Path(directory)
    logger.debug("Scanning %s for *%s files", directory, suffix)

    project_files: list[ProjectFile] = []
    for path in directory.iterdir():
        if not path.name.endswith(suffix) or not path.is_file():
            continue
        created_at, modified_at = _read_timestamps(path)
        project_files.append(
            ProjectFile(
                created_at=created_at,
                modified_at=modified_at,
                name=path.name,
                version=extract_version(path.name),
            )
        )

    # Versioned saves are assumed to be created in version order, so sorting
    # by creation time matches sorting by version.
    project_files.sort(key=lambda project_file: project_file.sort_key)
    logger.debug("Found %d project files in %s", len(project_files), directory)
    return project_files


def scan_project_files(
    directory: Union[str, Path],
    suffix: str,
    max_minutes_between_saves: int,
) -> list[ProjectFile]:
    """Find project files in ``directory`` and calculate time spent on each."""
    project_files = collect_project_files(directory, suffix)
    calculate_time_spent(project_files, max_gap_from_minutes(max_minutes_between_saves))
    return project_files


def _read_timestamps(path: Path) -> tuple[datetime, datetime]:
    """Return local (created, modified) times for ``path``."""
    stat = path.stat()
    created = getattr(stat, "st_birthtime", None)
    if created is None:
        # st_ctime is the creation time on Windows only.
        if os.name != "nt":
            _log_creation_time_fallback()
        created = stat.st_ctime
    created_at = datetime.fromtimestamp(created).astimezone()
    modified_at = datetime.fromtimestamp(stat.st_mtime).astimezone()
    return created_at, modified_at


@functools.cache
def _log_creation_time_fallback() -> None:
    logger.debug(
        "File creation time is unavailable on this platform; using inode change time."
    )
