"""Stash services: configuration and logging."""
