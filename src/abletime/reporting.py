"""Reporting utilities for CLI output."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict

from .config import ScanSettings
from .engine import split_sessions, sum_time_spent
from .models import ProjectFile

_ROW_FMT = "{:<21} {:<13} {}"


class ProjectFileReport(BaseModel):
    name: str
    created_at: datetime
    modified_at: datetime
    version: Optional[str] = None
    time_spent: str
    time_spent_seconds: float

    model_config = ConfigDict(extra="forbid")


class SessionReport(BaseModel):
    label: Optional[str] = None
    time_spent: str
    time_spent_seconds: float
    files: list[ProjectFileReport]

    model_config = ConfigDict(extra="forbid")


class ProjectReport(BaseModel):
    directory: str
    suffix: str
    max_minutes_between_saves: int
    sessions: list[SessionReport]
    total_time_spent: str
    total_time_spent_seconds: float

    model_config = ConfigDict(extra="forbid")


class SummaryPrinter:
    """Render human-readable project summaries in the console."""

    def print_project_summary(self, project_files: Sequence[ProjectFile]) -> None:
        if not project_files:
            print("No project files found")
            return

        print(_ROW_FMT.format("Start time", "Duration", "Name"))
        for session in split_sessions(project_files):
            label = session.label
            if label is not None:
                print(f"Version {label}.x - {format_duration(session.time_spent)}")
            for project_file in session.files:
                print(format_row(project_file))
            print()
        print("Total project time")
        print(format_duration(sum_time_spent(project_files)))

    def print_json(
        self, project_files: Sequence[ProjectFile], settings: ScanSettings
    ) -> None:
        print(build_report(project_files, settings).model_dump_json(indent=2))


def build_report(
    project_files: Sequence[ProjectFile], settings: ScanSettings
) -> ProjectReport:
    sessions = [
        SessionReport(
            label=session.label,
            time_spent=format_duration(session.time_spent),
            time_spent_seconds=session.time_spent.total_seconds(),
            files=[_file_report(project_file) for project_file in session.files],
        )
        for session in split_sessions(project_files)
    ]
    total = sum_time_spent(project_files)
    return ProjectReport(
        directory=str(settings.directory),
        suffix=settings.suffix,
        max_minutes_between_saves=settings.max_minutes_between_saves,
        sessions=sessions,
        total_time_spent=format_duration(total),
        total_time_spent_seconds=total.total_seconds(),
    )


def _file_report(project_file: ProjectFile) -> ProjectFileReport:
    return ProjectFileReport(
        name=project_file.name,
        created_at=project_file.created_at,
        modified_at=project_file.modified_at,
        version=str(project_file.version) if project_file.version is not None else None,
        time_spent=format_duration(project_file.time_spent),
        time_spent_seconds=project_file.time_spent.total_seconds(),
    )


def format_row(project_file: ProjectFile) -> str:
    return _ROW_FMT.format(
        format_start_time(project_file.created_at),
        format_duration(project_file.time_spent),
        project_file.name,
    )


def format_start_time(value: datetime) -> str:
    """Format as e.g. ``Tue Mar  3 09:05:07`` (day padded with a space)."""
    return f"{value:%a %b} {value.day:>2} {value:%H:%M:%S}"


def format_duration(duration: timedelta) -> str:
    """Format as ``H:MM:SS.mmm``; hours are not padded."""
    total_ms = duration // timedelta(milliseconds=1)
    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    seconds, milliseconds = divmod(remainder, 1000)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"
