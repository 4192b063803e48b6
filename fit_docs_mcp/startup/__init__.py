"""Startup checks run before a transport starts serving."""

from .config_validator import ConfigValidator, ConfigValidationError

__all__ = [
    'ConfigValidator',
    'ConfigValidationError',
]
