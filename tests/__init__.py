"""
File System Cache Test Suite

Test Structure:
- unit/: Unit tests for hashing, envelopes, paths, config and the cache engine
- integration/: CLI round trips against a real directory
- conftest.py: Shared fixtures and configuration
"""
