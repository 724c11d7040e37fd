"""
wordcount Unit Tests Package.

This package contains unit tests for individual modules and functions.

Test organization:
- test_config.py: Tests for configuration loading, parsing and logging setup
- counting/: Tests for the unit counter and the file-level runner
"""
