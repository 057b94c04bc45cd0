"""Helpers for callers: label mapping and DataFrame scoring."""
