"""
Test suite for PyNoiseGraph package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for individual noise functions, transforms and blenders
- Integration tests for complete texture graphs

Run with: pytest
"""
