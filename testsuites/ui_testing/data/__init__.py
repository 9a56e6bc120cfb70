"""Sauce Demo test data."""
