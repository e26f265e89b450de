"""
Test suites package.

`testsuites` stays importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - shared framework and page objects across the login suites
"""
