"""
Internal Services Package

This package contains the mandala core services:
- Placement Engine: coordinates for postits inside their dimension/scale cell
- Postit Tree: insert/update/delete on the postit forest
- Postit Service: postit lifecycle over a mandala document
- Mandala Configuration: effective axes and mandala overlap
"""

from .placement_engine import placement_engine, PlacementEngine, BatchPlacement, CellBounds
from .postit_service import postit_service, PostitService
from .exceptions import (
    MandalaServiceError,
    InvalidConfigurationError,
    ConfigurationMismatchError,
    NoValidPostitsError,
    PostitNotFoundError,
    DuplicatePostitIdError,
)

__all__ = [
    'placement_engine',
    'PlacementEngine',
    'BatchPlacement',
    'CellBounds',
    'postit_service',
    'PostitService',
    'MandalaServiceError',
    'InvalidConfigurationError',
    'ConfigurationMismatchError',
    'NoValidPostitsError',
    'PostitNotFoundError',
    'DuplicatePostitIdError',
]
