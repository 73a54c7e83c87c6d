"""Data models for planning and execution separation."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum


class BranchType(Enum):
    """Kind of branch the pipeline runs for."""
    FEAT = "feat"
    FIX = "fix"
    MAIN = "main"
    RELEASE = "release"
    OTHER = "other"


class LookupStatus(Enum):
    """Outcome of asking the Tag Store for the latest tag on a branch."""
    FOUND = "found"
    NONE_ON_BRANCH = "none_on_branch"  # Line has no tag yet, not an error
    QUERY_FAILED = "query_failed"      # Git could not answer


class PlanStatus(Enum):
    """Outcome of planning the next tag."""
    NEW_TAG = "new_tag"
    NO_UPDATE = "no_update"
    ALREADY_EXISTS = "already_exists"
    ERROR = "error"


@dataclass(frozen=True)
class Version:
    """A parsed version tag. ``beta`` is None for stable releases."""
    major: int
    minor: int
    patch: int
    beta: Optional[int] = None

    @property
    def core(self) -> Tuple[int, int, int]:
        """The (major, minor, patch) triple, without the beta component."""
        return (self.major, self.minor, self.patch)

    @property
    def is_beta(self) -> bool:
        """Whether this is a pre-release rather than a stable release."""
        return self.beta is not None


@dataclass
class TagLookup:
    """Result of a latest-tag query for one branch."""
    branch: str
    status: LookupStatus
    tag: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def found(cls, branch: str, tag: str) -> "TagLookup":
        return cls(branch=branch, status=LookupStatus.FOUND, tag=tag)

    @classmethod
    def none_on_branch(cls, branch: str) -> "TagLookup":
        return cls(branch=branch, status=LookupStatus.NONE_ON_BRANCH)

    @classmethod
    def query_failed(cls, branch: str, reason: str) -> "TagLookup":
        return cls(branch=branch, status=LookupStatus.QUERY_FAILED, reason=reason)

    def tag_or_default(self, default: str) -> Optional[str]:
        """Found tag, the default when the branch has none, None when the query failed."""
        if self.status == LookupStatus.FOUND:
            return self.tag
        if self.status == LookupStatus.NONE_ON_BRANCH:
            return default
        return None


@dataclass
class TagPlan:
    """Complete plan for one tagging run."""
    status: PlanStatus
    branch_name: str
    branch_type: BranchType

    # Tags the decision was based on
    base_tag: Optional[str] = None
    main_tag: Optional[str] = None
    existing_tags: List[str] = field(default_factory=list)

    # Decision
    next_tag: Optional[str] = None
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    # Metadata
    dry_run: bool = False
    annotate: bool = False

    def needs_publish(self) -> bool:
        """Check if there is a new tag to create and push."""
        return self.status == PlanStatus.NEW_TAG and bool(self.next_tag)


@dataclass
class ExecutionResult:
    """Result of executing a tag plan."""
    success: bool
    tag: Optional[str] = None
    created: bool = False
    pushed: bool = False
    errors: List[str] = field(default_factory=list)
    dry_run: bool = False
