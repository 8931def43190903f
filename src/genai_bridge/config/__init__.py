"""
Configuration
=============

Environment-driven, Pydantic-validated settings for the bridge.
"""

from .loader import ConfigLoader, get_config, reset_config
from .models import BridgeConfig

__all__ = [
    "BridgeConfig",
    "ConfigLoader",
    "get_config",
    "reset_config",
]
