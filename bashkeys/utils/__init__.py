"""Shared utilities: console, config, errors and logging."""
