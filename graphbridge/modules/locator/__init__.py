"""
Locator Module - Black Box Interface

Purpose: Find the Microsoft Graph CLI executable on the host
Interface: locate(), require(), invalidate()
Hidden: Search order, per-OS install locations, path caching
"""

from .locator import ExecutableLocator, ExecutableNotFoundError

__all__ = ["ExecutableLocator", "ExecutableNotFoundError"]
