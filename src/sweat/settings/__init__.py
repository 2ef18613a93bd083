"""Settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml
"""

from .user import UserSettings

__all__ = ["UserSettings"]
