"""Shared types, protocols, errors, RNG and logging helpers."""
