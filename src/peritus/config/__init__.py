"""
Configuration module for the dashboard.
"""

from .settings import DashboardConfig, load_config

__all__ = ["DashboardConfig", "load_config"]
