"""Plan executor - executes a prepared plan."""

from git.exc import GitCommandError

from .models import TagPlan, ExecutionResult
from .io_layer import IOLayer


def execute_plan(plan: TagPlan, io_layer: IOLayer) -> ExecutionResult:
    """
    Execute a prepared plan.

    This function creates and pushes the tag described in the plan.
    Plans without a new tag are a successful no-op.
    """
    result = ExecutionResult(success=True, tag=plan.next_tag, dry_run=plan.dry_run)

    if not plan.needs_publish():
        print("No tag to publish.")
        return result

    message = f"Release {plan.next_tag}" if plan.annotate else None

    try:
        result.created = io_layer.create_tag(plan.next_tag, message=message)
        result.pushed = io_layer.push_tag(plan.next_tag)
    except GitCommandError as e:
        result.success = False
        reason = str(e.stderr or e).strip()
        result.errors.append(f"Failed to create/push tag {plan.next_tag}: {reason}")

    return result
