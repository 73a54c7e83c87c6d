"""
Branch Classification Module

Pure functions for classifying branch names and guessing the source
branch of a merge from its commit message.
This module contains no side effects - only branch analysis logic.
"""

import re
from typing import Optional

from .config import FEAT_PREFIX, FIX_PREFIX, MAIN_BRANCH, RELEASE_BRANCH
from .models import BranchType

MERGE_COMMIT_PATTERN = re.compile(r"Merge pull request #\d+ from .+/(feat|fix)/(.+)")


def classify_branch(branch_name: str) -> BranchType:
    """
    Determine the type of a branch from its name.

    Pure function that classifies a branch without any I/O.

    Args:
        branch_name: The branch name, e.g. "feat/login" or "main"

    Returns:
        BranchType enum value
    """
    if not branch_name:
        return BranchType.OTHER

    if branch_name.startswith(FEAT_PREFIX):
        return BranchType.FEAT

    if branch_name.startswith(FIX_PREFIX):
        return BranchType.FIX

    if branch_name == MAIN_BRANCH:
        return BranchType.MAIN

    if branch_name == RELEASE_BRANCH:
        return BranchType.RELEASE

    return BranchType.OTHER


def branch_from_commit_message(message: Optional[str]) -> Optional[str]:
    """
    Guess a feat/fix branch name from the subject of the latest commit.

    Recognizes GitHub merge commits ("Merge pull request #12 from org/feat/x")
    and conventional-commit prefixes ("feat: ...", "fix(scope): ...").

    Args:
        message: Commit subject line

    Returns:
        A synthetic branch name such as "feat/branch-from-merge", or None
    """
    if not message:
        return None

    message = message.strip()

    merge_match = MERGE_COMMIT_PATTERN.search(message)
    if merge_match:
        return f"{merge_match.group(1)}/branch-from-merge"

    if message.startswith("feat:") or message.startswith("feat("):
        return "feat/from-commit"

    if message.startswith("fix:") or message.startswith("fix("):
        return "fix/from-commit"

    return None
