"""
I/O Layer for Auto Tagger

This module contains all I/O operations (file system, Git, GitHub)
separated from business logic. This is the "imperative shell" that
handles all side effects.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from git import Repo
from git.exc import GitCommandError
from github.GithubException import GithubException

from .config import DEFAULT_REMOTE, MISSING_REF_MESSAGES, NO_TAG_MESSAGES
from .models import TagLookup

logger = logging.getLogger(__name__)


class IOLayer:
    """Handles all I/O operations for the application."""

    def __init__(
        self,
        repo: Repo,
        github_repo: Optional[Any] = None,
        dry_run: bool = False,
        remote: str = DEFAULT_REMOTE,
    ):
        """Initialize the I/O layer.

        Args:
            repo: Git repository object
            github_repo: GitHub repository object, None when no token is configured
            dry_run: If True, don't create or push tags
            remote: Remote the tags are described from and pushed to
        """
        self.repo = repo
        self.github_repo = github_repo
        self.dry_run = dry_run
        self.remote = remote

    # -----------------------------------------------------------------------------
    # File System Operations
    # -----------------------------------------------------------------------------

    def read_yaml(self, path: str) -> Optional[Dict[str, Any]]:
        """Read a YAML file and return its contents.

        Args:
            path: Path to the YAML file

        Returns:
            Dictionary with YAML contents or None if file doesn't exist
        """
        file_path = Path(path)
        if not file_path.exists():
            return None

        with file_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {path}: expected a mapping at the top level")
            return None
        return data

    # -----------------------------------------------------------------------------
    # Tag Store Operations
    # -----------------------------------------------------------------------------

    def fetch_tags(self) -> bool:
        """Fetch tags from the remote so describe sees the latest state.

        Returns:
            True if fetched, False if the fetch failed
        """
        try:
            self.repo.git.fetch(self.remote, "--tags")
        except GitCommandError as e:
            logger.warning(f"Could not fetch tags from {self.remote}: {e}")
            return False
        return True

    def list_tags(self) -> List[str]:
        """List all tags in the repository.

        Returns:
            List of tag names, empty if there are none or git failed
        """
        try:
            output = self.repo.git.tag("-l")
        except GitCommandError as e:
            logger.warning(f"Could not list tags: {e}")
            return []

        return [line.strip() for line in output.splitlines() if line.strip()]

    def latest_tag(self, branch: str) -> TagLookup:
        """Get the latest tag reachable from a remote branch.

        Args:
            branch: Branch name, resolved against the configured remote

        Returns:
            TagLookup telling apart "found", "no tag yet" and "query failed"
        """
        ref = f"{self.remote}/{branch}"
        try:
            tag = self.repo.git.describe("--tags", "--abbrev=0", ref).strip()
        except GitCommandError as e:
            stderr = str(e.stderr or "")
            if any(message in stderr for message in NO_TAG_MESSAGES):
                logger.info(f"No tag reachable from {ref}")
                return TagLookup.none_on_branch(branch)
            if any(message in stderr for message in MISSING_REF_MESSAGES):
                logger.info(f"Branch {ref} does not exist yet")
                return TagLookup.none_on_branch(branch)
            logger.warning(f"Could not describe {ref}: {stderr.strip() or e}")
            return TagLookup.query_failed(branch, stderr.strip() or str(e))

        if not tag:
            return TagLookup.none_on_branch(branch)

        logger.info(f"Latest tag on {ref}: {tag}")
        return TagLookup.found(branch, tag)

    # -----------------------------------------------------------------------------
    # Branch Information
    # -----------------------------------------------------------------------------

    def current_branch(self) -> Optional[str]:
        """Get the checked-out branch name, None if it cannot be determined."""
        try:
            name = self.repo.git.rev_parse("--abbrev-ref", "HEAD").strip()
        except GitCommandError as e:
            logger.warning(f"Could not determine current branch: {e}")
            return None
        return name or None

    def last_commit_message(self) -> Optional[str]:
        """Get the subject line of the most recent commit."""
        try:
            return self.repo.git.log("-1", "--pretty=format:%s").strip()
        except GitCommandError:
            print("Could not detect source branch from commit message")
            return None

    def pull_request_head_ref(self, commit_sha: str) -> Optional[str]:
        """Get the head branch of the pull request that introduced a commit.

        Args:
            commit_sha: Commit the pipeline runs for

        Returns:
            Head branch name, None without a GitHub client or matching PR
        """
        if self.github_repo is None or not commit_sha:
            return None

        try:
            pulls = self.github_repo.get_commit(commit_sha).get_pulls()
            for pr in pulls:
                logger.info(f"Commit {commit_sha[:7]} belongs to PR #{pr.number} ({pr.head.ref})")
                return pr.head.ref
        except GithubException as e:
            logger.warning(f"Could not look up pull requests for {commit_sha}: {e.status} {e.data}")
        return None

    # -----------------------------------------------------------------------------
    # Publisher Operations
    # -----------------------------------------------------------------------------

    def create_tag(self, tag: str, message: Optional[str] = None) -> bool:
        """Create a tag at HEAD.

        Args:
            tag: Tag name
            message: Annotation message; a lightweight tag is created when None

        Returns:
            True if created, False if dry run
        """
        if self.dry_run:
            kind = "annotated tag" if message else "tag"
            print(f"[DRY RUN] Would create {kind}: {tag}")
            return False

        if message:
            self.repo.git.tag("-a", tag, "-m", message)
        else:
            self.repo.git.tag(tag)
        print(f"Created tag: {tag}")
        return True

    def push_tag(self, tag: str) -> bool:
        """Push a tag to the remote.

        Args:
            tag: Tag name

        Returns:
            True if pushed, False if dry run
        """
        if self.dry_run:
            print(f"[DRY RUN] Would push tag {tag} to {self.remote}")
            return False

        self.repo.git.push(self.remote, tag)
        print(f"Pushed tag: {tag}")
        return True
