"""Runtime state models."""

from kubeskew.models.state.app_settings import AppSettings

__all__ = ["AppSettings"]
