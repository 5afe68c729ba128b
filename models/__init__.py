"""
Mandala Pydantic Models
=======================

Value models for mandala configurations, postits and their coordinates.

Author: lycosa9527
Made by: MindSpring Team
"""

from .common import Tag, validate_hex_color

from .postits import (
    Coordinate,
    Postit,
    PostitPatch,
    PostitDraft,
    PostitSource,
    generate_postit_id,
)

from .mandala import (
    Dimension,
    MandalaCenter,
    MandalaConfiguration,
    MandalaDocument,
)

__all__ = [
    # Common
    "Tag",
    "validate_hex_color",
    # Postits
    "Coordinate",
    "Postit",
    "PostitPatch",
    "PostitDraft",
    "PostitSource",
    "generate_postit_id",
    # Mandala
    "Dimension",
    "MandalaCenter",
    "MandalaConfiguration",
    "MandalaDocument",
]
