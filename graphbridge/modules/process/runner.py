"""
Process execution capability for the Graph CLI bridge.

The bridge only depends on the ProcessRunner protocol. SubprocessRunner is the
default implementation: it spawns the executable, captures both streams and
kills the child when the timeout elapses.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Protocol, Union

logger = logging.getLogger("graphbridge.process")

# Exit code reported when a process had to be killed on timeout
TIMEOUT_EXIT_CODE = -1


@dataclass
class ProcessResult:
    """Outcome of a single process execution."""

    exit_code: int
    output: str = ""
    error: str = ""
    timed_out: bool = False

    @property
    def succeeded(self) -> bool:
        """Zero exit code and nothing written to stderr."""
        return self.exit_code == 0 and not self.error.strip()


class ProcessRunner(Protocol):
    """Protocol for process runners - allows swappable implementations."""

    def run(self, path: str, arguments: str, timeout_seconds: int) -> ProcessResult:
        """
        Run an executable with an argument line.

        Args:
            path: Absolute path to the executable
            arguments: Argument line forwarded verbatim
            timeout_seconds: Maximum wait before the process is terminated

        Returns:
            ProcessResult with exit code and captured streams
        """
        ...


def split_argument_line(arguments: str) -> List[str]:
    """
    Split an argument line the way Windows and .NET parse a command line.

    Only double quotes group words. Single quotes are ordinary characters, so
    OData filters such as startswith(displayName,'A') pass through intact.
    Backslashes are literal unless they precede a double quote: 2n backslashes
    before a quote yield n backslashes and the quote toggles grouping, 2n+1
    yield n backslashes and a literal quote. Inside quotes a doubled quote is
    a literal quote.
    """
    args: List[str] = []
    current: List[str] = []
    in_quotes = False
    has_token = False
    i = 0
    length = len(arguments)

    while i < length:
        char = arguments[i]

        if char == "\\":
            end = i
            while end < length and arguments[end] == "\\":
                end += 1
            count = end - i
            if end < length and arguments[end] == '"':
                current.append("\\" * (count // 2))
                if count % 2:
                    current.append('"')
                    end += 1
            else:
                current.append("\\" * count)
            has_token = True
            i = end
        elif char == '"':
            if in_quotes and i + 1 < length and arguments[i + 1] == '"':
                current.append('"')
                i += 2
            else:
                in_quotes = not in_quotes
                i += 1
            has_token = True
        elif char in " \t" and not in_quotes:
            if has_token:
                args.append("".join(current))
                current = []
                has_token = False
            i += 1
        else:
            current.append(char)
            has_token = True
            i += 1

    if has_token:
        args.append("".join(current))
    return args


def build_command(path: str, arguments: str, windows: Optional[bool] = None) -> Union[str, List[str]]:
    """
    Build the command line handed to subprocess.

    On Windows the argument line is passed through untouched after the quoted
    executable path, the way CreateProcess expects it. Elsewhere the line is
    split with the same rules so both platforms see the same argv.
    """
    if windows is None:
        windows = os.name == "nt"

    if windows:
        quoted = subprocess.list2cmdline([path])
        return f"{quoted} {arguments}".rstrip()

    return [path] + split_argument_line(arguments)


def _as_text(value: Union[str, bytes, None]) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class SubprocessRunner:
    """Runs executables with subprocess.run and a hard timeout."""

    def run(self, path: str, arguments: str, timeout_seconds: int) -> ProcessResult:
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")

        cmd = build_command(path, arguments)
        logger.debug(f"Running: {path} {arguments} (timeout={timeout_seconds}s)")

        try:
            process = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=timeout_seconds,
            )
        except subprocess.TimeoutExpired as e:
            # subprocess.run has already killed the child at this point
            logger.warning(f"Process timed out after {timeout_seconds}s: {path} {arguments}")
            return ProcessResult(
                exit_code=TIMEOUT_EXIT_CODE,
                output=_as_text(e.stdout),
                error=f"Process timed out after {timeout_seconds} seconds",
                timed_out=True,
            )

        return ProcessResult(
            exit_code=process.returncode,
            output=_as_text(process.stdout),
            error=_as_text(process.stderr),
        )
