"""
Configuration package for textmotion

Provides animator settings via environment variables using pydantic-settings.
"""

from .settings import appsettings, AnimatorSettings

__all__ = ["appsettings", "AnimatorSettings"]
