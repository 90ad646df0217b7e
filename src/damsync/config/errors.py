"""Errors raised while assembling run settings, before any request is sent."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A repository URL, proxy, start path, delay or request rate is unusable."""


class MissingConfigurationError(ConfigurationError):
    """Credentials were neither passed on the command line nor found in the environment."""
