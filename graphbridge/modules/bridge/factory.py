"""
Bridge Factory following Black Box Design principles.

This factory:
- Constructs the bridge stack based on configuration
- Wires dependencies together
- Returns only the command facade (hiding implementation)
"""

import logging
from typing import Mapping, Optional

from ...config.provider import BridgeConfig, ConfigProvider
from ..auth import AuthenticationGate
from ..command import GraphCommand
from ..locator import ExecutableLocator
from ..process import ProcessRunner, SubprocessRunner
from .bridge import InvocationBridge

logger = logging.getLogger("graphbridge.factory")


class BridgeFactory:
    """
    Factory for building the Graph CLI bridge.

    This is the composition root that:
    - Creates the locator, authentication gate and runner
    - Wires them into a single InvocationBridge
    - Returns the GraphCommand that callers talk to
    """

    @staticmethod
    def build_bridge(
        config: BridgeConfig,
        runner: Optional[ProcessRunner] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> InvocationBridge:
        """
        Build an InvocationBridge from bridge configuration.

        Args:
            config: Bridge configuration
            runner: Optional process runner, SubprocessRunner by default
            environ: Optional environment mapping for discovery and login checks

        Returns:
            Fully wired InvocationBridge
        """
        locator = ExecutableLocator(
            name=config.executable_name,
            extra_dirs=config.extra_paths,
            environ=environ,
        )
        gate = AuthenticationGate(
            locator,
            client_id_env=config.client_id_env,
            login_command=config.login_command,
            login_timeout=config.login_timeout,
            retry_when_skipped=config.retry_when_skipped,
            environ=environ,
        )
        return InvocationBridge(
            locator,
            gate,
            runner or SubprocessRunner(),
            timeout_seconds=config.process_timeout,
        )

    @staticmethod
    def build(
        config_provider: ConfigProvider,
        runner: Optional[ProcessRunner] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> GraphCommand:
        """
        Build the complete command stack.

        Args:
            config_provider: Configuration provider
            runner: Optional process runner
            environ: Optional environment mapping

        Returns:
            GraphCommand facade (hides all implementation details)
        """
        config = config_provider.get_bridge_config()
        bridge = BridgeFactory.build_bridge(config, runner=runner, environ=environ)
        logger.info(
            f"Graph CLI bridge built (executable={config.executable_name}, "
            f"timeout={config.process_timeout}s, login_timeout={config.login_timeout}s)"
        )
        return GraphCommand(bridge)
