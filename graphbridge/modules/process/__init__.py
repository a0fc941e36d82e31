"""
Process Module - Black Box Interface

Purpose: Spawn external executables with captured output and a timeout
Interface: ProcessRunner.run(path, arguments, timeout_seconds) -> ProcessResult
Hidden: Argument-line splitting, stream decoding, timeout and kill handling

Can be replaced with any runner honouring the ProcessRunner protocol.
"""

from .runner import (
    TIMEOUT_EXIT_CODE,
    ProcessResult,
    ProcessRunner,
    SubprocessRunner,
    build_command,
    split_argument_line,
)

__all__ = [
    "ProcessResult",
    "ProcessRunner",
    "SubprocessRunner",
    "TIMEOUT_EXIT_CODE",
    "build_command",
    "split_argument_line",
]
