"""Test fixtures for Auto Tagger.

This module provides shared fixtures used across multiple test modules.
It sets up mock Git repositories and a helper for building a mocked
Tag Store with a given tag state.

Fixtures:
    mock_repo: Mock GitPython repository with a mocked ``git`` command object
    io_layer: IOLayer over the mock repository
    tag_store: Factory building a mocked IOLayer with given latest tags
"""

from unittest.mock import Mock

import pytest

from auto_tagger.io_layer import IOLayer
from auto_tagger.models import TagLookup


@pytest.fixture
def mock_repo():
    """Provides a mock Git repository."""
    repo = Mock()
    repo.git = Mock()
    return repo


@pytest.fixture
def io_layer(mock_repo):
    """Provides an IOLayer over the mock repository."""
    return IOLayer(mock_repo, github_repo=None, dry_run=False)


@pytest.fixture
def tag_store():
    """Factory for a mocked IOLayer with a fixed tag state.

    Args (of the returned callable):
        release: Latest tag on release, None for no tag, or a TagLookup
        main: Latest tag on main, None for no tag, or a TagLookup
        tags: All tags in the repository

    Example:
        store = tag_store(release="v1.2.0", main="v1.2.0-beta.2", tags=["v1.2.0"])
    """

    def _lookup(branch, value):
        if isinstance(value, TagLookup):
            return value
        if value is None:
            return TagLookup.none_on_branch(branch)
        return TagLookup.found(branch, value)

    def _build(release=None, main=None, tags=None):
        store = Mock(spec=IOLayer)
        lookups = {"release": _lookup("release", release), "main": _lookup("main", main)}
        store.latest_tag.side_effect = lambda branch: lookups[branch]
        store.list_tags.return_value = list(tags or [])
        return store

    return _build
