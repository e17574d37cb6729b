"""Routers module - FastAPI route handlers"""

from . import anchors, config, diff

__all__ = ["anchors", "config", "diff"]
