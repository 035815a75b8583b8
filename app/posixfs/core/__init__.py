"""Configuration, paths and theming for posixfs."""
