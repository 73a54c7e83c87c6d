"""
Git Operations Module for Auto Tagger

This module handles Git-related setup such as opening the local repository
and initializing the GitHub client.

Functions:
    setup_git_client: Sets up Git and (optionally) GitHub clients

Raises:
    GitOperationError: When Git operations fail
"""

from typing import Optional

from git import Repo
from github import Auth, Github
from github.Repository import Repository

from .exceptions import GitOperationError


def setup_git_client(
    token: str = "", repo_name: str = "", path: str = "."
) -> tuple[Repo, Optional[Repository]]:
    """Set up Git and GitHub clients.

    The GitHub client is only created when a token is given; without it
    branch resolution falls back to commit message heuristics.
    """
    try:
        repo = Repo(path)
        github_repo = None
        if token and repo_name:
            github_client = Github(auth=Auth.Token(token))
            github_repo = github_client.get_repo(repo_name)
        return repo, github_repo
    except Exception as e:
        raise GitOperationError(f"Failed to setup git clients: {e}") from e
