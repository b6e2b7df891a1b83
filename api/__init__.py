"""Input schemas for road network construction."""

from .data_schemas import (
    NodeRecord,
    EdgeRecord,
    NetworkDefinition
)

__all__ = [
    'NodeRecord',
    'EdgeRecord',
    'NetworkDefinition'
]
