"""Shared utilities for vapisim."""
