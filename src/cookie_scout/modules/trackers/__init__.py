"""Tracker signatures and page scanning."""
