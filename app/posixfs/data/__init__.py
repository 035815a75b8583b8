"""Bundled data files for posixfs."""
