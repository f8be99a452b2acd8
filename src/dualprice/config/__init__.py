"""
Configuration Module

Provides the host configuration boundary (Pydantic Settings) and the
resolver that turns raw configuration into an immutable settings snapshot.
"""

from dualprice.config.settings import Settings
from dualprice.config.resolver import resolve

__all__ = ["Settings", "resolve"]
