"""
Peritus: terminal dashboard for browsing, adding, and deleting experts.
"""

__version__ = "0.1.0"
