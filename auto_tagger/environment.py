"""
Environment Configuration Module

Handles parsing and validation of environment variables and of the
optional YAML settings file.
This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Set
import logging

import dpath
from dpath.exceptions import PathNotFound

from .config import (
    CONTINUATION_ANY,
    CONTINUATION_MODES,
    DEFAULT_CONFIG_FILE,
    DEFAULT_REMOTE,
    DEFAULT_TAG,
)

logger = logging.getLogger(__name__)

# Settings file path -> (config field, environment variable)
FILE_SETTINGS = {
    "remote": ("remote", "REMOTE"),
    "tags.default": ("default_tag", "DEFAULT_TAG"),
    "tags.annotate": ("annotate_tags", "ANNOTATE_TAGS"),
    "tags.fetch": ("fetch_tags", "FETCH_TAGS"),
    "beta.continuation": ("beta_continuation", "BETA_CONTINUATION"),
}
BOOLEAN_FIELDS = {"annotate_tags", "fetch_tags"}


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    branch_name: str = ""
    head_ref: str = ""
    ref_name: str = ""
    commit_sha: str = ""
    github_repository: str = ""
    github_token: str = ""
    dry_run: bool = False
    target_path: str = "."
    remote: str = DEFAULT_REMOTE
    default_tag: str = DEFAULT_TAG
    fetch_tags: bool = False
    annotate_tags: bool = False
    beta_continuation: str = CONTINUATION_ANY
    config_file: str = DEFAULT_CONFIG_FILE
    _env_keys: Set[str] = field(default_factory=set, init=False, repr=False)

    @classmethod
    def from_env(cls, env: Dict[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        config = cls(
            branch_name=env.get("BRANCH_NAME", "").strip(),
            head_ref=env.get("GITHUB_HEAD_REF", "").strip(),
            ref_name=env.get("GITHUB_REF_NAME", "").strip(),
            commit_sha=env.get("GITHUB_SHA", "").strip(),
            github_repository=env.get("GITHUB_REPOSITORY", "").strip(),
            github_token=env.get("GH_TOKEN", ""),
            dry_run=env.get("DRY_RUN", "false").lower() == "true",
            target_path=env.get("TARGET_PATH", "."),
            remote=env.get("REMOTE", DEFAULT_REMOTE).strip() or DEFAULT_REMOTE,
            default_tag=env.get("DEFAULT_TAG", DEFAULT_TAG).strip(),
            fetch_tags=env.get("FETCH_TAGS", "false").lower() == "true",
            annotate_tags=env.get("ANNOTATE_TAGS", "false").lower() == "true",
            beta_continuation=env.get("BETA_CONTINUATION", CONTINUATION_ANY).strip().lower(),
            config_file=env.get("CONFIG_FILE", DEFAULT_CONFIG_FILE),
        )
        config._env_keys = {key for _, key in FILE_SETTINGS.values() if key in env}
        return config

    def with_file_settings(self, data: Optional[Dict[str, Any]]) -> "EnvironmentConfig":
        """Fill settings the environment left unset from the YAML settings file.

        Environment variables always win over the file.

        Args:
            data: Parsed YAML content, or None when there is no file

        Returns:
            New EnvironmentConfig instance
        """
        if not data:
            return self

        updates = {}
        for path, (field_name, env_key) in FILE_SETTINGS.items():
            if env_key in self._env_keys:
                continue
            try:
                value = dpath.get(data, path, separator=".")
            except (KeyError, PathNotFound):
                continue
            if value is None or isinstance(value, dict):
                continue
            if field_name in BOOLEAN_FIELDS:
                value = _as_bool(value)
            else:
                value = str(value).strip()
                if field_name == "beta_continuation":
                    value = value.lower()
            logger.info(f"Using {path}={value} from {self.config_file}")
            updates[field_name] = value

        merged = replace(self, **updates)
        merged._env_keys = set(self._env_keys)
        return merged

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        from .version_codec import parse_version

        errors = []

        default_version = parse_version(self.default_tag)
        if default_version is None:
            errors.append(
                f"Invalid DEFAULT_TAG format: '{self.default_tag}'. "
                "Must be a version such as v0.1.0"
            )
        elif default_version.is_beta:
            errors.append(f"DEFAULT_TAG must be a stable version, got '{self.default_tag}'")

        if self.beta_continuation not in CONTINUATION_MODES:
            errors.append(
                f"Invalid BETA_CONTINUATION '{self.beta_continuation}'. "
                f"Valid options are: {', '.join(CONTINUATION_MODES)}"
            )

        if not self.remote:
            errors.append("REMOTE cannot be empty")

        if self.github_token and not self.github_repository:
            errors.append("GITHUB_REPOSITORY is required when GH_TOKEN is set")

        return errors

    @property
    def continue_any_branch(self) -> bool:
        """Whether a stale beta series continues for every non-release branch."""
        return self.beta_continuation == CONTINUATION_ANY
