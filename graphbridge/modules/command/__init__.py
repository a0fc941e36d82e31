"""
Command Module - Black Box Interface

Purpose: Expose the Graph CLI bridge as a host command
Interface: describe(), bind_options(), validate(), execute(), run()
Hidden: Result classification, exception containment, response shaping
"""

from .graph import GraphCommand

__all__ = ["GraphCommand"]
