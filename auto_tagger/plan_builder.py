"""Plan builder - decides the next tag for a branch."""

import logging
from typing import Optional, Tuple

from .branch_classification import classify_branch
from .config import MAIN_BRANCH, RELEASE_BRANCH
from .environment import EnvironmentConfig
from .io_layer import IOLayer
from .models import BranchType, LookupStatus, PlanStatus, TagPlan, Version
from .version_codec import format_version, parse_version, same_core

logger = logging.getLogger(__name__)


def prepare_plan(config: EnvironmentConfig, io_layer: IOLayer, branch_name: str) -> TagPlan:
    """
    Prepare a complete tagging plan.

    This function reads the current tag state and decides the next tag,
    but doesn't create or push anything.

    Args:
        config: Environment configuration
        io_layer: IO layer for git operations
        branch_name: Branch the run is tagging for
    """
    branch_type = classify_branch(branch_name)
    logger.info(f"Branch type: {branch_type.value}")

    plan = TagPlan(
        status=PlanStatus.NO_UPDATE,
        branch_name=branch_name,
        branch_type=branch_type,
        dry_run=config.dry_run,
        annotate=config.annotate_tags,
    )

    if config.fetch_tags:
        io_layer.fetch_tags()
    plan.existing_tags = io_layer.list_tags()

    # Look up both lines fresh on every run
    plan.base_tag = _latest_or_default(io_layer, RELEASE_BRANCH, config.default_tag, plan)
    plan.main_tag = _latest_or_default(io_layer, MAIN_BRANCH, config.default_tag, plan)

    next_tag, error = plan_next_version(
        branch_type,
        plan.base_tag,
        plan.main_tag,
        continue_any_branch=config.continue_any_branch,
    )

    if error:
        plan.status = PlanStatus.ERROR
        plan.error = error
        return plan

    if not next_tag:
        logger.info("No version update needed for this branch type")
        return plan

    plan.next_tag = next_tag
    if next_tag in plan.existing_tags:
        logger.info(f"Tag {next_tag} already exists, skipping")
        plan.status = PlanStatus.ALREADY_EXISTS
    else:
        plan.status = PlanStatus.NEW_TAG

    return plan


def _latest_or_default(io_layer: IOLayer, branch: str, default_tag: str, plan: TagPlan) -> str:
    """Latest tag on a branch, the default when it has none or cannot be read."""
    lookup = io_layer.latest_tag(branch)
    if lookup.status == LookupStatus.FOUND:
        return lookup.tag

    if lookup.status == LookupStatus.QUERY_FAILED:
        warning = f"Could not determine latest tag on {branch} ({lookup.reason}), assuming {default_tag}"
        logger.warning(warning)
        plan.warnings.append(warning)
    else:
        logger.info(f"No tag on {branch} yet, assuming {default_tag}")
    return default_tag


def plan_next_version(
    branch_type: BranchType,
    base_tag: Optional[str],
    main_tag: Optional[str],
    continue_any_branch: bool = True,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Decide the next tag from the latest stable and beta tags.

    Pure function: the same inputs always give the same result.

    Args:
        branch_type: Type of the branch being tagged
        base_tag: Latest tag reachable from the release branch
        main_tag: Latest tag reachable from the main branch
        continue_any_branch: Continue a stale beta series for every
            non-release branch; when False only feat/fix branches do

    Returns:
        (next_tag, error). Both None means no update is needed.
    """
    beta = parse_version(main_tag)

    # Promotion: release the current beta as stable
    if branch_type == BranchType.RELEASE:
        if beta is not None and beta.is_beta:
            return format_version(beta, include_beta=False), None

        logger.warning(f"No beta version found, using latest tag {main_tag}")
        return main_tag, None

    base = parse_version(base_tag)
    if base is None:
        error = f"Could not parse base version from tag '{base_tag}'"
        logger.error(error)
        return None, error

    logger.info(f"Base version for main: {format_version(base)}")
    logger.info(
        f"Latest beta version: {format_version(beta, include_beta=True) if beta else 'none'}"
    )

    if beta is not None and not same_core(beta, base):
        if continue_any_branch or branch_type in (BranchType.FEAT, BranchType.FIX):
            return _continue_beta_series(beta, branch_type), None
        logger.info(f"Not continuing beta series for {branch_type.value} branch")
        return None, None

    return _start_beta_series(base, branch_type), None


def _continue_beta_series(beta: Version, branch_type: BranchType) -> str:
    """Increment the beta counter, keeping major, minor and patch of the series."""
    if branch_type in (BranchType.MAIN, BranchType.OTHER):
        logger.warning(
            f"Continuing beta series {format_version(beta)} for {branch_type.value} branch"
        )

    new_version = Version(
        major=beta.major,
        minor=beta.minor,
        patch=beta.patch,
        beta=(beta.beta or 0) + 1,
    )
    return format_version(new_version, include_beta=True)


def _start_beta_series(base: Version, branch_type: BranchType) -> Optional[str]:
    """Start a new beta series from the stable base; feat bumps minor, fix bumps patch."""
    if branch_type == BranchType.FEAT:
        new_version = Version(major=base.major, minor=base.minor + 1, patch=0, beta=0)
    elif branch_type == BranchType.FIX:
        new_version = Version(major=base.major, minor=base.minor, patch=base.patch + 1, beta=0)
    else:
        return None

    tag = format_version(new_version, include_beta=True)
    logger.info(f"New version for {branch_type.value}: {tag}")
    return tag
