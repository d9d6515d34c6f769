"""Utilities to pull semantic versions out of project file names."""

from __future__ import annotations

import logging
import re
from typing import Optional

from semver import Version

logger = logging.getLogger(__name__)

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)


def extract_version(name: str) -> Optional[Version]:
    """Return the first semantic version found in ``name``, if any."""
    match = SEMVER_PATTERN.search(name)
    if not match:
        return None
    try:
        return Version.parse(match.group(0))
    except ValueError:
        logger.debug("Ignoring unparseable version %r in %s", match.group(0), name)
        return None
