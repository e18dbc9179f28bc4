"""Utilities for writing artifacts and staging files."""
