"""Configuration modules for the routing engine."""

from .routing import RoutingConfig
from .settings import Settings, get_settings

__all__ = [
    'RoutingConfig',
    'Settings',
    'get_settings'
]
