"""
Bridge Module - Black Box Interface

Purpose: Invoke Graph CLI sub-commands as native operations
Interface: InvocationBridge.invoke(subcommand), classify(result)
Hidden: Authentication ordering, executable resolution, timeout handling

The composition root lives in graphbridge.modules.bridge.factory.
"""

from .bridge import InvocationBridge
from .mapper import MappedResult, classify

__all__ = ["InvocationBridge", "MappedResult", "classify"]
