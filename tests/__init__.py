"""Test suite for Auto Tagger.

This package contains test modules and fixtures for verifying the functionality
of the Auto Tagger tool. It includes tests for:
- Version parsing and branch classification
- Next version planning
- Git tag queries and publishing
- Branch resolution and configuration handling

The test suite uses pytest and provides fixtures for common test scenarios.
"""
