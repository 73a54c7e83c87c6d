"""Unit tests for core business logic (pure functions).

These tests demonstrate the simplicity of testing pure functions
without any mocks or complex setup. Each test is fast and deterministic.
"""

import pytest
from auto_tagger.version_codec import parse_version, format_version, same_core
from auto_tagger.branch_classification import classify_branch, branch_from_commit_message
from auto_tagger.plan_builder import plan_next_version
from auto_tagger.models import BranchType, Version


class TestVersionParsing:
    """Test tag parsing logic."""

    def test_stable_tag(self):
        """Test parsing of stable tags."""
        assert parse_version("v1.2.3") == Version(1, 2, 3)
        assert parse_version("1.2.3") == Version(1, 2, 3)
        assert parse_version("v0.0.0") == Version(0, 0, 0)

    def test_beta_tag(self):
        """Test parsing of beta tags."""
        assert parse_version("v1.2.0-beta.3") == Version(1, 2, 0, beta=3)
        assert parse_version("v1.2.0-beta.0") == Version(1, 2, 0, beta=0)
        assert parse_version("2.10.11-beta.12") == Version(2, 10, 11, beta=12)

    def test_surrounding_whitespace(self):
        """Test that git output newlines are tolerated."""
        assert parse_version("v1.2.3\n") == Version(1, 2, 3)

    @pytest.mark.parametrize("tag", [
        "",
        "   ",
        None,
        "latest",
        "v1.2",
        "v1.2.3.4",
        "v1.2.3-rc.1",
        "v1.2.3-beta",
        "v1.2.3-beta.x",
        "V1.2.3",
        "vv1.2.3",
        "release-1.2.3",
        "v1.2.3-beta.1-extra",
        "v-1.2.3",
        "v\u0661.2.3",
        "v1.2.3-beta.\u0663",
    ])
    def test_malformed_tag(self, tag):
        """Test that malformed tags yield None instead of raising."""
        assert parse_version(tag) is None


class TestVersionFormatting:
    """Test tag formatting logic."""

    def test_stable(self):
        """Test formatting of stable versions."""
        assert format_version(Version(1, 2, 3)) == "v1.2.3"
        assert format_version(Version(1, 2, 3), include_beta=True) == "v1.2.3"

    def test_beta_suffix_only_when_requested(self):
        """Test that the beta suffix is only written when asked for."""
        assert format_version(Version(1, 3, 0, beta=2), include_beta=True) == "v1.3.0-beta.2"
        assert format_version(Version(1, 3, 0, beta=2)) == "v1.3.0"

    def test_beta_zero(self):
        """Test that beta 0 is a real beta number, not a missing one."""
        assert format_version(Version(0, 2, 0, beta=0), include_beta=True) == "v0.2.0-beta.0"

    @pytest.mark.parametrize("version", [
        Version(0, 0, 0),
        Version(0, 1, 0, beta=0),
        Version(1, 2, 3, beta=4),
        Version(10, 20, 30),
    ])
    def test_round_trip(self, version):
        """Test that parse undoes format for well-formed versions."""
        assert parse_version(format_version(version, include_beta=True)) == version
        stable = parse_version(format_version(version, include_beta=False))
        assert stable.core == version.core
        assert stable.beta is None

    def test_same_core(self):
        """Test core comparison ignores the beta number."""
        assert same_core(Version(1, 2, 0), Version(1, 2, 0, beta=5))
        assert not same_core(Version(1, 2, 0), Version(1, 1, 0, beta=5))


class TestBranchClassification:
    """Test branch classification logic."""

    def test_feature_branch(self):
        """Test classification of feature branches."""
        assert classify_branch("feat/login") == BranchType.FEAT
        assert classify_branch("feat/nested/name") == BranchType.FEAT

    def test_fix_branch(self):
        """Test classification of fix branches."""
        assert classify_branch("fix/crash") == BranchType.FIX

    def test_main_and_release(self):
        """Test exact matches for the long-lived branches."""
        assert classify_branch("main") == BranchType.MAIN
        assert classify_branch("release") == BranchType.RELEASE

    def test_other_branch(self):
        """Test that anything else is classified as other."""
        assert classify_branch("") == BranchType.OTHER
        assert classify_branch("feature/login") == BranchType.OTHER
        assert classify_branch("feat") == BranchType.OTHER
        assert classify_branch("main-backup") == BranchType.OTHER
        assert classify_branch("releases") == BranchType.OTHER
        assert classify_branch("hotfix/x") == BranchType.OTHER


class TestBranchFromCommitMessage:
    """Test source branch detection from commit subjects."""

    def test_merge_commit(self):
        """Test GitHub merge commit subjects."""
        assert branch_from_commit_message(
            "Merge pull request #42 from acme/feat/new-login"
        ) == "feat/branch-from-merge"
        assert branch_from_commit_message(
            "Merge pull request #7 from acme/fix/null-pointer"
        ) == "fix/branch-from-merge"

    def test_conventional_commit(self):
        """Test conventional commit prefixes."""
        assert branch_from_commit_message("feat: add login") == "feat/from-commit"
        assert branch_from_commit_message("feat(auth): add login") == "feat/from-commit"
        assert branch_from_commit_message("fix: handle empty tags") == "fix/from-commit"
        assert branch_from_commit_message("fix(cli): exit code") == "fix/from-commit"

    def test_no_signal(self):
        """Test subjects that say nothing about the source branch."""
        assert branch_from_commit_message(None) is None
        assert branch_from_commit_message("") is None
        assert branch_from_commit_message("Merge pull request #3 from acme/main") is None
        assert branch_from_commit_message("chore: bump deps") is None
        assert branch_from_commit_message("feature: not conventional") is None


class TestPlanNextVersion:
    """Test the next version decision procedure."""

    def test_release_promotes_beta(self):
        """Scenario A: release strips the beta suffix of main's latest tag."""
        assert plan_next_version(BranchType.RELEASE, "v1.1.0", "v1.2.0-beta.3") == ("v1.2.0", None)

    def test_release_without_beta_returns_main_tag(self):
        """Test the degenerate promotion where no beta was ever cut."""
        assert plan_next_version(BranchType.RELEASE, "v1.2.0", "v1.2.0") == ("v1.2.0", None)
        assert plan_next_version(BranchType.RELEASE, "v1.2.0", "nightly") == ("nightly", None)

    def test_release_ignores_undecodable_base(self):
        """Test that promotion does not need a stable base."""
        assert plan_next_version(BranchType.RELEASE, "garbage", "v2.0.0-beta.1") == ("v2.0.0", None)

    def test_feat_starts_minor_series(self):
        """Scenario B: matching cores on a feat branch bump minor."""
        assert plan_next_version(BranchType.FEAT, "v1.2.0", "v1.2.0-beta.2") == ("v1.3.0-beta.0", None)

    def test_feat_resets_patch(self):
        """Test that a new minor series resets patch."""
        assert plan_next_version(BranchType.FEAT, "v1.2.5", "v1.2.5") == ("v1.3.0-beta.0", None)

    def test_fix_starts_patch_series(self):
        """Test that matching cores on a fix branch bump patch."""
        assert plan_next_version(BranchType.FIX, "v1.2.0", "v1.2.0") == ("v1.2.1-beta.0", None)

    def test_stale_beta_continues_series(self):
        """Scenario C: different cores continue the existing beta series."""
        assert plan_next_version(BranchType.FIX, "v1.2.0", "v1.1.0-beta.5") == ("v1.1.0-beta.6", None)
        assert plan_next_version(BranchType.FEAT, "v1.2.0", "v1.3.0-beta.0") == ("v1.3.0-beta.1", None)

    def test_stale_stable_tag_on_main_starts_at_beta_one(self):
        """Test that a missing beta number on main counts as zero."""
        assert plan_next_version(BranchType.FEAT, "v1.2.0", "v1.1.0") == ("v1.1.0-beta.1", None)

    def test_continuation_applies_to_main_and_other_by_default(self):
        """Test that the continuation fires for every non-release branch type."""
        assert plan_next_version(BranchType.MAIN, "v1.2.0", "v1.3.0-beta.4") == ("v1.3.0-beta.5", None)
        assert plan_next_version(BranchType.OTHER, "v1.2.0", "v1.3.0-beta.4") == ("v1.3.0-beta.5", None)

    def test_continuation_limited_to_feat_fix(self):
        """Test the feat-fix continuation mode."""
        assert plan_next_version(
            BranchType.MAIN, "v1.2.0", "v1.3.0-beta.4", continue_any_branch=False
        ) == (None, None)
        assert plan_next_version(
            BranchType.FIX, "v1.2.0", "v1.3.0-beta.4", continue_any_branch=False
        ) == ("v1.3.0-beta.5", None)

    def test_matching_cores_without_rule(self):
        """Scenario E: main/other with matching cores need no update."""
        assert plan_next_version(BranchType.OTHER, "v1.2.0", "v1.2.0-beta.1") == (None, None)
        assert plan_next_version(BranchType.MAIN, "v1.2.0", "v1.2.0") == (None, None)

    def test_undecodable_base_is_an_error(self):
        """Scenario D: without a stable base no tag is produced."""
        next_tag, error = plan_next_version(BranchType.FEAT, "not-a-version", "v1.2.0-beta.1")
        assert next_tag is None
        assert "Could not parse base version" in error

        next_tag, error = plan_next_version(BranchType.FIX, None, "v1.2.0-beta.1")
        assert next_tag is None
        assert error

    def test_undecodable_main_tag_starts_new_series(self):
        """Test that a malformed main tag is treated as no beta series."""
        assert plan_next_version(BranchType.FEAT, "v1.2.0", "nightly") == ("v1.3.0-beta.0", None)
        assert plan_next_version(BranchType.MAIN, "v1.2.0", "nightly") == (None, None)

    def test_first_run_defaults(self):
        """Test a fresh repository where both lines fall back to v0.1.0."""
        assert plan_next_version(BranchType.FEAT, "v0.1.0", "v0.1.0") == ("v0.2.0-beta.0", None)
        assert plan_next_version(BranchType.FIX, "v0.1.0", "v0.1.0") == ("v0.1.1-beta.0", None)

    def test_deterministic(self):
        """Test that identical inputs give identical output."""
        first = plan_next_version(BranchType.FEAT, "v1.2.0", "v1.2.0-beta.2")
        second = plan_next_version(BranchType.FEAT, "v1.2.0", "v1.2.0-beta.2")
        assert first == second
