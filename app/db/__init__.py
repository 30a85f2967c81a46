"""
Database declarative base - import models against this
"""

from .base import Base, TimestampMixin

__all__ = ["Base", "TimestampMixin"]
