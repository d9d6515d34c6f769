"""Domain models for scanned project files."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from semver import Version


@dataclass(slots=True)
class ProjectFile:
    """A saved version of a project and the time attributed to it."""

    created_at: datetime
    modified_at: datetime
    time_spent: timedelta = timedelta(0)
    name: str = ""
    version: Optional[Version] = None

    @property
    def sort_key(self) -> tuple:
        # Unversioned files order before versioned ones on an otherwise full tie.
        return (
            self.created_at,
            self.modified_at,
            self.time_spent,
            self.name,
            self.version is not None,
            self.version,
        )


@dataclass(slots=True)
class Session:
    """A contiguous run of project files that make up one unit of work."""

    files: list[ProjectFile] = field(default_factory=list)

    @property
    def label(self) -> Optional[str]:
        if not self.files or self.files[0].version is None:
            return None
        version = self.files[0].version
        return f"{version.major}.{version.minor}"

    @property
    def time_spent(self) -> timedelta:
        return sum((project_file.time_spent for project_file in self.files), timedelta(0))
