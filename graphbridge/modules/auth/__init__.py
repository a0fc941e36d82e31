"""
Authentication Module - Black Box Interface

Purpose: One-time service principal login against the Graph CLI
Interface: ensure_authenticated(runner), is_authenticated
Hidden: Credential detection, locking, login command and timeout

The CLI reads the actual credentials from the environment; this module can be
replaced with any other login strategy without affecting other modules.
"""

from .gate import AuthenticationGate

__all__ = ["AuthenticationGate"]
