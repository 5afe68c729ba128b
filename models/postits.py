"""
Postit Models
=============

Coordinates, postits and the payloads used to create or edit them.

Coordinates live in the unit disc: (0, 0) is the mandala center and a
percentile distance of 1 is its outer edge.

Author: lycosa9527
Made by: MindSpring Team
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import Tag


def generate_postit_id() -> str:
    """Generate a UUID string for postit IDs."""
    return str(uuid.uuid4())


class Coordinate(BaseModel):
    """Cartesian position, optionally with the polar form it was generated from"""
    x: float = Field(..., description="Horizontal position, percentile of the outer radius")
    y: float = Field(..., description="Vertical position, percentile of the outer radius")
    angle: Optional[float] = Field(None, description="Angle in radians")
    percentile_distance: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="Distance from the center to the exterior (0-1)"
    )

    @classmethod
    def origin(cls) -> "Coordinate":
        return cls(x=0.0, y=0.0)

    def squared_distance_to(self, other: "Coordinate") -> float:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"x": 0.25, "y": 0.43, "angle": 1.047, "percentile_distance": 0.5}
        }


class PostitSource(BaseModel):
    """Mandala a postit was brought in from by an overlap"""
    id: Optional[str] = Field(None, description="Source mandala ID")
    name: Optional[str] = Field(None, description="Source mandala name")

    class Config:
        frozen = True


class Postit(BaseModel):
    """
    Note placed on the mandala.

    Children make the postits a forest of unbounded depth. Instances are
    frozen: edits produce new values through model_copy.
    """
    id: str = Field(default_factory=generate_postit_id, description="Unique postit ID")
    content: str = Field(..., description="Postit text")
    dimension: str = Field(..., description="Dimension name the postit belongs to")
    section: str = Field(..., description="Scale label the postit belongs to")
    tags: List[Tag] = Field(default_factory=list, description="Ordered tags")
    coordinates: Optional[Coordinate] = Field(None, description="Position on the mandala")
    children: List["Postit"] = Field(default_factory=list, description="Child postits")
    source: Optional[PostitSource] = Field(None, description="Source mandala, set on overlapped postits")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "a1b2c3d4-e5f6-7890-1234-567890abcdef",
                "content": "Falta de espacios verdes",
                "dimension": "Ecología",
                "section": "Comunidad",
                "tags": [{"name": "Urgente", "color": "#FF0000"}],
                "coordinates": {"x": 0.21, "y": -0.35},
                "children": []
            }
        }


class PostitPatch(BaseModel):
    """New content and tags for an existing postit"""
    content: str = Field(..., min_length=1, description="New postit text")
    tags: List[Tag] = Field(default_factory=list, description="New ordered tags")


class PostitDraft(BaseModel):
    """Unplaced postit as produced upstream: tags are referenced by name only"""
    content: str = Field(..., min_length=1, description="Postit text")
    dimension: str = Field(..., description="Dimension name")
    section: str = Field(..., description="Scale label")
    tags: List[str] = Field(default_factory=list, description="Tag names from the project palette")


Postit.model_rebuild()
