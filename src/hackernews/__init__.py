"""
Hacker News clone backend
GraphQL API over links, comments and users
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
