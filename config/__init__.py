"""
Configuration management package

Provides configuration classes for the lift bank and the HTTP server.
"""

from .lift_bank import (
    DispatchConfig,
    LiftBankConfig,
    LiftConfig,
    ServerConfig
)

from .config_loader import (
    ConfigLoader,
    load_dispatch_config,
    save_dispatch_config
)

__all__ = [
    # Lift bank
    'DispatchConfig',
    'LiftBankConfig',
    'LiftConfig',
    'ServerConfig',

    # Loader
    'ConfigLoader',
    'load_dispatch_config',
    'save_dispatch_config',
]
