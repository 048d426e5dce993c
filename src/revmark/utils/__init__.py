"""Utility helpers for tree queries, escaping and URL handling."""
