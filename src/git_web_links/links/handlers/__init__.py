"""Bundled provider definitions."""
