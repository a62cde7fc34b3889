"""Filesystem helpers used by the application layer."""
