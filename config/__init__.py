"""Configuration for calendar grid defaults."""

from .settings import Config

__all__ = ["Config"]
