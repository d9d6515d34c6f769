from datetime import datetime, timedelta, timezone

import pytest
from semver import Version

from abletime.models import ProjectFile

BASE_TIME = datetime(2024, 3, 5, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_file():
    def _make(name, created_offset, modified_offset=None, version=None):
        created_at = BASE_TIME + timedelta(seconds=created_offset)
        if modified_offset is None:
            modified_offset = created_offset
        modified_at = BASE_TIME + timedelta(seconds=modified_offset)
        return ProjectFile(
            created_at=created_at,
            modified_at=modified_at,
            name=name,
            version=Version.parse(version) if version else None,
        )

    return _make
