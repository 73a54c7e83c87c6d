#!/usr/bin/env python3

"""
Automatic Version Tagging Script

Simplified CLI using the Functional Core, Imperative Shell pattern.
All version decisions are in pure functions, all I/O is in the I/O layer.
"""

import os
import sys
from .branch_resolution import EnvironmentBranchProvider, resolve_branch
from .environment import EnvironmentConfig
from .git_operations import setup_git_client
from .io_layer import IOLayer
from .models import PlanStatus
from .plan_builder import prepare_plan
from .plan_executor import execute_plan
from .utils import setup_logging


def main():
    """Main entry point - Clean planning/execution pipeline."""
    setup_logging(os.environ.get("LOG_LEVEL", "INFO"))
    try:
        # Step 1: Parse environment
        config = EnvironmentConfig.from_env(os.environ)

        # Handle target path change
        if config.target_path != ".":
            print(f"Changing to target directory: {config.target_path}")
            os.chdir(config.target_path)

        # Step 2: Setup I/O layer
        repo, github_repo = setup_git_client(config.github_token, config.github_repository)
        io_layer = IOLayer(repo, github_repo, config.dry_run, config.remote)

        # Step 3: Merge settings file and validate configuration
        config = config.with_file_settings(io_layer.read_yaml(config.config_file))
        io_layer.remote = config.remote
        errors = config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        # Step 4: Resolve branch
        branch_name = resolve_branch(EnvironmentBranchProvider(config, io_layer))
        print(f"Current branch: {branch_name}")
        print(f"Dry run: {config.dry_run}")

        # Step 5: Prepare plan (reads tags, decides next version)
        plan = prepare_plan(config, io_layer, branch_name)
        print(f"Branch type: {plan.branch_type.value}")
        print(f"Existing tags: {', '.join(plan.existing_tags) or 'none'}")
        for warning in plan.warnings:
            print(f"Warning: {warning}")

        if plan.status == PlanStatus.ERROR:
            print(f"Error: {plan.error}")
            sys.exit(1)
        if plan.status == PlanStatus.NO_UPDATE:
            print("No version update needed for this branch type")
            return
        if plan.status == PlanStatus.ALREADY_EXISTS:
            print(f"Tag {plan.next_tag} already exists, skipping")
            return

        print(f"Next version: {plan.next_tag}")

        # Step 6: Execute plan (creates and pushes the tag)
        result = execute_plan(plan, io_layer)

        if not result.success:
            for error in result.errors:
                print(f"Error: {error}")
            sys.exit(1)

        if result.dry_run:
            print(f"\nDry run summary:\nWould create and push tag {result.tag}")
        else:
            print("Tagging completed successfully")
    except Exception as e:
        print(f"Unexpected error: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
