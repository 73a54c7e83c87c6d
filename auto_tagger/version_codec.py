"""
Version Codec Module

Pure functions for parsing and formatting version tags.
This module contains no side effects - only tag analysis logic.

Tags look like ``v1.2.3`` (stable) or ``v1.2.3-beta.4`` (pre-release).
The leading ``v`` is optional when parsing and always written when formatting.
"""

import re
from typing import Optional

from .models import Version

VERSION_PATTERN = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)(?:-beta\.(\d+))?$", re.ASCII)


def parse_version(tag: Optional[str]) -> Optional[Version]:
    """
    Parse a tag string into a Version.

    Pure function that never raises: anything that does not match the
    tag format yields None.

    Args:
        tag: The tag string, e.g. "v1.2.0-beta.3"

    Returns:
        Version, or None if the tag is malformed
    """
    if not tag or not tag.strip():
        return None

    match = VERSION_PATTERN.match(tag.strip())
    if not match:
        return None

    major, minor, patch, beta = match.groups()
    return Version(
        major=int(major),
        minor=int(minor),
        patch=int(patch),
        beta=int(beta) if beta is not None else None,
    )


def format_version(version: Version, include_beta: bool = False) -> str:
    """
    Render a Version as a tag string.

    Args:
        version: Version to render
        include_beta: Append ``-beta.N`` when the version carries a beta number

    Returns:
        Tag string such as "v1.2.0" or "v1.2.0-beta.0"
    """
    tag = f"v{version.major}.{version.minor}.{version.patch}"
    if include_beta and version.beta is not None:
        tag += f"-beta.{version.beta}"
    return tag


def same_core(first: Version, second: Version) -> bool:
    """Check whether two versions share major, minor and patch."""
    return first.core == second.core
