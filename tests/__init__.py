# SHAVault Test Suite
"""
Test suite including:
- Unit tests for each SHA-256 stage
- Integration tests against reference implementations
- Security tests (invalid inputs, block boundaries, avalanche)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
