"""
Invocation bridge for the Microsoft Graph CLI.

Runs one sub-command per call: authenticate (advisory), resolve the
executable, then hand off to the process runner with the configured timeout.
"""

import logging
from typing import Optional

from ..auth import AuthenticationGate
from ..locator import ExecutableLocator
from ..process import ProcessResult, ProcessRunner

logger = logging.getLogger("graphbridge.bridge")


class InvocationBridge:
    """
    Long-lived bridge shared by all callers.

    Owns the locator cache and the authentication state through its
    collaborators; each invoke() spawns its own process.
    """

    def __init__(
        self,
        locator: ExecutableLocator,
        gate: AuthenticationGate,
        runner: ProcessRunner,
        timeout_seconds: int = 300,
    ):
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")

        self.locator = locator
        self.gate = gate
        self.runner = runner
        self.timeout_seconds = timeout_seconds

    @property
    def is_authenticated(self) -> bool:
        return self.gate.is_authenticated

    def executable_path(self) -> Optional[str]:
        """Resolved executable path, or None when not installed."""
        return self.locator.locate()

    def invoke(self, subcommand: str) -> ProcessResult:
        """
        Execute a sub-command against the CLI.

        Args:
            subcommand: Argument line, e.g. "users list"

        Returns:
            ProcessResult with the exit code and captured streams

        Raises:
            ValueError: If the sub-command is empty
            ExecutableNotFoundError: If the CLI is not installed
        """
        if not subcommand or not subcommand.strip():
            raise ValueError("A Graph CLI command is required.")

        # Result is advisory: an unauthenticated CLI reports its own errors
        self.gate.ensure_authenticated(self.runner)

        mgc_path = self.locator.require()
        logger.info(f"Executing mgc command: {subcommand}")
        return self.runner.run(mgc_path, subcommand, self.timeout_seconds)
