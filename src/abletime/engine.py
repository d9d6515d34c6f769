"""Time-spent inference over an ordered sequence of project files.

Each file is credited with one of two candidate deltas:

* its own drift, ``modified_at - created_at``;
* the gap until the next file was created, used when the next file belongs to
  the same session (no minor or major version bump between the two).

A candidate at or above the configured ceiling is treated as idle time and is
not counted. The second candidate, when accepted, replaces the first.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional, Sequence

from semver import Version

from .models import ProjectFile, Session

logger = logging.getLogger(__name__)

NO_CEILING = timedelta.max


def max_gap_from_minutes(minutes: int) -> timedelta:
    """Convert a minute count into a ceiling; ``minutes <= 0`` disables it."""
    if minutes <= 0:
        return NO_CEILING
    try:
        return timedelta(minutes=minutes)
    except OverflowError:
        return NO_CEILING


def is_session_boundary(
    current: Optional[Version],
    following: Optional[Version],
    require_versions: bool,
) -> bool:
    """Return whether ``following`` starts a new session after ``current``."""
    if current is not None and following is not None:
        return following.minor > current.minor or following.major > current.major
    if require_versions:
        return False
    # Exactly one side versioned.
    return (current is None) != (following is None)


def calculate_time_spent(files: Sequence[ProjectFile], max_gap: timedelta) -> None:
    """Assign ``time_spent`` to every file in place.

    ``files`` must already be in scan order. Negative deltas (clock skew or a
    modification stamp older than the creation stamp) count as zero.
    """
    last = len(files) - 1
    for i, project_file in enumerate(files):
        spent = timedelta(0)

        own_drift = _non_negative(project_file.modified_at - project_file.created_at)
        if own_drift < max_gap:
            spent = own_drift

        if i < last and not is_session_boundary(
            project_file.version, files[i + 1].version, True
        ):
            until_next = _non_negative(files[i + 1].created_at - project_file.created_at)
            if until_next < max_gap:
                spent = until_next

        project_file.time_spent = spent
        logger.debug("Credited %s with %s", project_file.name, spent)


def split_sessions(files: Sequence[ProjectFile]) -> list[Session]:
    """Partition ordered files into sessions for reporting."""
    sessions: list[Session] = []
    start = 0
    for i in range(len(files)):
        is_last = i == len(files) - 1
        if is_last or is_session_boundary(files[i].version, files[i + 1].version, False):
            sessions.append(Session(files=list(files[start : i + 1])))
            start = i + 1
    return sessions


def sum_time_spent(files: Sequence[ProjectFile]) -> timedelta:
    return sum((project_file.time_spent for project_file in files), timedelta(0))


def _non_negative(delta: timedelta) -> timedelta:
    return delta if delta > timedelta(0) else timedelta(0)
