"""Utility modules: terminal UI and logging."""
