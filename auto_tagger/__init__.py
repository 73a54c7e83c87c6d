"""Semantic version tagging for feat/fix -> main (beta) -> release (stable) pipelines."""
