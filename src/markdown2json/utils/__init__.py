"""Utility helpers for markdown2json."""
