"""
Config Module - Black Box Interface

Purpose: Application configuration management
Interface: EnvConfigProvider.get_bridge_config(), EnvConfigProvider.get_api_config()
Hidden: Config sources, validation logic, environment parsing

Can be replaced with any other ConfigProvider implementation.
"""

from .provider import APIConfig, BridgeConfig, ConfigProvider, EnvConfigProvider

__all__ = ["APIConfig", "BridgeConfig", "ConfigProvider", "EnvConfigProvider"]
