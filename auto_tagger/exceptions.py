"""Custom exceptions for Auto Tagger."""


class GitOperationError(Exception):
    """Raised when the Git or GitHub clients cannot be set up."""


class ConfigurationError(Exception):
    """Raised when the run cannot be configured, e.g. no branch can be resolved."""
