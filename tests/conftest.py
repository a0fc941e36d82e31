"""
Shared pytest fixtures for graphbridge tests.

This module provides common fixtures including:
- MgcMocker: Mock Graph CLI subprocess calls with canned responses
- fake_mgc: A fake mgc install on disk with a matching environment
- Bridge and command builders wired to the fake install
"""

import os
import subprocess
import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Union
from unittest.mock import MagicMock, patch

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from graphbridge.modules.auth import AuthenticationGate
from graphbridge.modules.bridge import InvocationBridge
from graphbridge.modules.command import GraphCommand
from graphbridge.modules.locator import ExecutableLocator
from graphbridge.modules.process import SubprocessRunner

_REAL_SUBPROCESS_RUN = subprocess.run


# =============================================================================
# Graph CLI Mocking Infrastructure
# =============================================================================

@dataclass
class MgcResponse:
    """Represents a mocked mgc command response."""
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    timeout: bool = False
    delay: float = 0.0

    def to_completed_process(self) -> MagicMock:
        """Convert to a subprocess.CompletedProcess-like mock."""
        result = MagicMock()
        result.stdout = self.stdout
        result.stderr = self.stderr
        result.returncode = self.returncode
        return result


@dataclass
class MgcCall:
    """Record of an mgc call made during testing."""
    command: Union[List[str], str]
    args: str
    timeout: Optional[float] = None
    matched_pattern: Optional[str] = None
    response: Optional[MgcResponse] = None


class MgcMocker:
    """
    Mock mgc subprocess calls with pattern-matched responses.

    This allows testing the bridge without a real Graph CLI install by
    intercepting subprocess.run calls.

    Usage:
        def test_list_users(mgc_mocker):
            mgc_mocker.register("users list", MgcResponse(stdout="[]"))

            result = bridge.invoke("users list")

            assert mgc_mocker.was_called_with("users list")
    """

    def __init__(self):
        self._responses: List[tuple] = []
        self._call_history: List[MgcCall] = []
        self._lock = threading.Lock()
        self._default_response = MgcResponse(
            stderr="Error: mock not configured for this command",
            returncode=1
        )

    def register(
        self,
        pattern: Union[str, Pattern],
        response: MgcResponse,
        priority: int = 0
    ) -> "MgcMocker":
        """
        Register a response for commands matching the pattern.

        Args:
            pattern: String (substring match) or regex pattern
            response: MgcResponse to return when matched
            priority: Higher priority patterns are checked first

        Returns:
            self for chaining
        """
        self._responses.append((pattern, response, priority))
        self._responses.sort(key=lambda x: x[2], reverse=True)
        return self

    def register_scenario(self, scenario_name: str) -> "MgcMocker":
        """Register all responses for a named scenario."""
        from fixtures.mgc_scenarios import SCENARIOS

        if scenario_name not in SCENARIOS:
            raise ValueError(
                f"Unknown scenario: {scenario_name}. "
                f"Available: {list(SCENARIOS.keys())}"
            )

        for pattern, response in SCENARIOS[scenario_name].items():
            self.register(pattern, response)

        return self

    def set_default_response(self, response: MgcResponse) -> "MgcMocker":
        """Set the default response for unmatched commands."""
        self._default_response = response
        return self

    @staticmethod
    def _split(cmd: Union[List[str], str]):
        if isinstance(cmd, str):
            program, _, rest = cmd.partition(" ")
            return program.strip('"'), rest
        return cmd[0], " ".join(cmd[1:])

    def mock_run(self, cmd, capture_output=True, text=True, timeout=None, **kwargs):
        """
        Mock implementation of subprocess.run for mgc commands.

        This method is used as a side_effect for patching subprocess.run.
        """
        program, args = self._split(cmd)

        # Only intercept mgc commands
        if os.path.basename(program) not in ("mgc", "mgc.exe"):
            return _REAL_SUBPROCESS_RUN(
                cmd, capture_output=capture_output, text=text, timeout=timeout, **kwargs
            )

        matched_pattern = None
        response = self._default_response

        for pattern, resp, _ in self._responses:
            if isinstance(pattern, str):
                if pattern in args:
                    matched_pattern = pattern
                    response = resp
                    break
            elif pattern.search(args):
                matched_pattern = pattern.pattern
                response = resp
                break

        with self._lock:
            self._call_history.append(MgcCall(
                command=cmd,
                args=args,
                timeout=timeout,
                matched_pattern=matched_pattern,
                response=response,
            ))

        if response.delay:
            time.sleep(response.delay)

        if response.timeout:
            raise subprocess.TimeoutExpired(cmd, timeout, output=response.stdout)

        return response.to_completed_process()

    @property
    def calls(self) -> List[MgcCall]:
        """Get all mgc calls made during the test."""
        return list(self._call_history)

    @property
    def call_count(self) -> int:
        """Get the number of mgc calls made."""
        return len(self._call_history)

    def was_called_with(self, pattern: str) -> bool:
        """Check if any call contained the given pattern."""
        return any(pattern in call.args for call in self._call_history)

    def get_calls_matching(self, pattern: str) -> List[MgcCall]:
        """Get all calls containing the given pattern."""
        return [c for c in self._call_history if pattern in c.args]

    def reset(self):
        """Clear call history (but keep registered responses)."""
        self._call_history = []

    def clear(self):
        """Clear both responses and call history."""
        self._responses = []
        self._call_history = []


@pytest.fixture
def mgc_mocker():
    """
    Fixture that provides an MgcMocker with subprocess.run patched.

    Usage:
        def test_something(mgc_mocker):
            mgc_mocker.register("users list", MgcResponse(stdout="[]"))
            # Your test code that calls mgc
            assert mgc_mocker.was_called_with("users list")
    """
    mocker = MgcMocker()
    with patch("subprocess.run", side_effect=mocker.mock_run):
        yield mocker


# =============================================================================
# Fake Install Infrastructure
# =============================================================================

@dataclass
class FakeMgcInstall:
    """A fake mgc binary on disk plus the environment that finds it."""
    bin_dir: str
    path: str
    environ: Dict[str, str] = field(default_factory=dict)


def write_fake_executable(directory, name: str = "mgc") -> str:
    """Create an empty executable file and return its path."""
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(str(directory), name)
    with open(path, "w") as f:
        f.write("#!/bin/sh\nexit 0\n")
    os.chmod(path, 0o755)
    return path


@pytest.fixture
def fake_mgc(tmp_path):
    """Fake mgc install reachable through PATH, without credentials."""
    bin_dir = tmp_path / "bin"
    path = write_fake_executable(bin_dir)
    return FakeMgcInstall(
        bin_dir=str(bin_dir),
        path=path,
        environ={"PATH": str(bin_dir), "HOME": str(tmp_path)},
    )


def build_bridge(
    environ: Dict[str, str],
    timeout_seconds: int = 300,
    login_timeout: int = 60,
    runner=None,
    retry_when_skipped: bool = False,
) -> InvocationBridge:
    """Wire a bridge that only searches the directories on the given PATH."""
    locator = ExecutableLocator(environ=environ, default_dirs=[], platform="linux")
    gate = AuthenticationGate(
        locator,
        login_timeout=login_timeout,
        retry_when_skipped=retry_when_skipped,
        environ=environ,
    )
    return InvocationBridge(locator, gate, runner or SubprocessRunner(), timeout_seconds=timeout_seconds)


@pytest.fixture
def bridge(fake_mgc):
    """Bridge over the fake install, no credentials provisioned."""
    return build_bridge(fake_mgc.environ)


@pytest.fixture
def graph_command(bridge):
    """GraphCommand over the fake install."""
    return GraphCommand(bridge)


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "mgc_mock: Tests using mocked mgc subprocess calls"
    )
    config.addinivalue_line(
        "markers", "integration: End-to-end tests through the full bridge stack"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that spawn real processes"
    )
