"""Playwright UI suites for Sauce Demo."""
