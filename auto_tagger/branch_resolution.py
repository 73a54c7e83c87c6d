"""
Branch Resolution Module

Determines which branch a run is tagging for. The planner never reads CI
variables itself: a BranchInfoProvider supplies an explicit branch name
and a fallback query, and resolve_branch picks between them.
"""

import logging
from typing import Optional, Protocol

from .branch_classification import branch_from_commit_message, classify_branch
from .config import MAIN_BRANCH, RELEASE_BRANCH
from .environment import EnvironmentConfig
from .exceptions import ConfigurationError
from .io_layer import IOLayer
from .models import BranchType

logger = logging.getLogger(__name__)


class BranchInfoProvider(Protocol):
    """Source of the branch name for a run."""

    def explicit_branch(self) -> Optional[str]:
        """Branch name given directly, e.g. by an override or a pull request."""

    def fallback_branch(self) -> Optional[str]:
        """Branch name worked out when no explicit one is given."""


class EnvironmentBranchProvider:
    """Reads the branch from GitHub Actions variables, Git and the GitHub API."""

    def __init__(self, config: EnvironmentConfig, io_layer: IOLayer):
        self.config = config
        self.io_layer = io_layer

    def explicit_branch(self) -> Optional[str]:
        # BRANCH_NAME overrides; GITHUB_HEAD_REF is set for pull requests
        explicit = (("BRANCH_NAME", self.config.branch_name), ("GITHUB_HEAD_REF", self.config.head_ref))
        for key, value in explicit:
            if value:
                logger.info(f"Using branch from {key}: {value}")
                return value
        return None

    def fallback_branch(self) -> Optional[str]:
        ref_name = self.config.ref_name
        if not ref_name:
            return self.io_layer.current_branch()

        if ref_name in (MAIN_BRANCH, RELEASE_BRANCH):
            source = self._source_branch()
            if source:
                logger.info(f"Detected source branch {source} for push to {ref_name}")
                return source

        return ref_name

    def _source_branch(self) -> Optional[str]:
        """Find the feat/fix branch that was merged into main or release."""
        head_ref = self.io_layer.pull_request_head_ref(self.config.commit_sha)
        if head_ref and classify_branch(head_ref) in (BranchType.FEAT, BranchType.FIX):
            return head_ref

        return branch_from_commit_message(self.io_layer.last_commit_message())


def resolve_branch(provider: BranchInfoProvider) -> str:
    """
    Resolve the branch name for this run.

    Args:
        provider: Supplies explicit and fallback branch names

    Returns:
        Branch name

    Raises:
        ConfigurationError: If neither source yields a branch
    """
    branch = provider.explicit_branch() or provider.fallback_branch()
    if not branch:
        raise ConfigurationError("Could not determine the current branch")
    return branch
