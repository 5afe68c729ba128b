"""
Configuration Package

This package contains application configuration:
- Settings: Environment variables and runtime settings (Config class and config instance)
- Mandala constants: placement defaults and composite-center naming
"""

from .settings import Config, config

__all__ = [
    'Config',
    'config',
]
