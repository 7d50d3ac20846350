"""Configuration helpers for chronofns."""

from chronofns.configuration.settings import (
    ResolverSettings,
    bootstrap_settings,
    load_settings,
    save_settings,
)

__all__ = [
    "ResolverSettings",
    "bootstrap_settings",
    "load_settings",
    "save_settings",
]
