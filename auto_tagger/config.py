"""
Configuration Module for Auto Tagger

This module contains constants used throughout the application.
They control which branches carry the beta and stable lines and
where tags are described from and pushed to.

Constants:
    MAIN_BRANCH: Branch that carries the beta series
    RELEASE_BRANCH: Branch that carries stable releases
    DEFAULT_TAG: Tag assumed for a line that has no tag yet
    DEFAULT_REMOTE: Remote the tags are described from and pushed to
    NO_TAG_MESSAGES: git-describe errors that mean "no tag on this line"
    MISSING_REF_MESSAGES: git-describe errors that mean the branch was never pushed
    CONTINUATION_MODES: Accepted values for BETA_CONTINUATION
    DEFAULT_CONFIG_FILE: Optional YAML file with tagging settings
"""

# Branches
MAIN_BRANCH = "main"
RELEASE_BRANCH = "release"
FEAT_PREFIX = "feat/"
FIX_PREFIX = "fix/"

# Tags
DEFAULT_TAG = "v0.1.0"
DEFAULT_REMOTE = "origin"
NO_TAG_MESSAGES = ("No names found", "No tags can describe")
MISSING_REF_MESSAGES = ("Not a valid object name", "unknown revision")

# Beta continuation modes
CONTINUATION_ANY = "any"
CONTINUATION_FEAT_FIX = "feat-fix"
CONTINUATION_MODES = (CONTINUATION_ANY, CONTINUATION_FEAT_FIX)

DEFAULT_CONFIG_FILE = ".auto-tag.yaml"
