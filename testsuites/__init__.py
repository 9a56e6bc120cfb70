"""
Test suites package.

This repository intentionally keeps `testsuites` importable to support:
  - IDE navigation
  - CI/CD module imports
  - Page objects and test data shared between suites
"""
