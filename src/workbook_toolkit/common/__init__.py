"""Shared helpers used by multiple subpackages."""
