"""
API Module - Black Box Interface

Purpose: Request and response envelopes
Interface: Pydantic models shared by the HTTP API, the console and the command
Hidden: Nothing, these are plain data contracts
"""

from .models import CommandInfo, CommandResponse, GraphOptions, HealthResponse

__all__ = [
    "CommandInfo",
    "CommandResponse",
    "GraphOptions",
    "HealthResponse",
]
