"""Configuration for appdocs."""

from .settings import PresentationConfig

__all__ = ["PresentationConfig"]
