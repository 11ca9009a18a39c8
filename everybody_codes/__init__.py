"""Workspace helper for Everybody Codes quests: scaffolding, fetching, running, timing and submitting."""

__version__ = "0.1.0"