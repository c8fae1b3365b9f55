# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Custom exceptions for the configuration system.

Kept separate so the CLI can catch config-specific failures without importing
the parser machinery.
"""

from tuplebench import TuplebenchError


class ConfigError(TuplebenchError):
    """Base for all configuration errors: bad flags, missing values, bad numbers."""


class ConfigValidationError(ConfigError):
    """
    Raised when the arguments parse fine but the resulting values fail schema
    validation, e.g. a negative size or zero repetitions.
    """
