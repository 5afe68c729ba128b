"""
Mandala Models
==============

Mandala configuration: ordered dimensions (angular sectors) and ordered
scales (radial bands, innermost first), plus the optional central character.

Author: lycosa9527
Made by: MindSpring Team
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .common import validate_hex_color
from .postits import Postit


class Dimension(BaseModel):
    """Named angular sector of the mandala"""
    name: str = Field(..., min_length=1, description="Dimension name")
    color: str = Field(..., description="Dimension color in hex format")

    @field_validator('color')
    @classmethod
    def check_color(cls, v):
        return validate_hex_color(v)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"name": "Recursos", "color": "#FF0000"}
        }


class MandalaCenter(BaseModel):
    """Central character of a mandala"""
    name: str = Field(..., min_length=1, description="Center name")
    description: Optional[str] = Field(None, description="Center description")
    color: str = Field(..., description="Center color in hex format")

    @field_validator('color')
    @classmethod
    def check_color(cls, v):
        return validate_hex_color(v)

    class Config:
        frozen = True


class MandalaConfiguration(BaseModel):
    """
    Ordered mandala axes.

    Dimension index selects the angular sector, scale index selects the
    radial band. Names must be unique within each axis.
    """
    center: Optional[MandalaCenter] = Field(None, description="Central character")
    dimensions: List[Dimension] = Field(..., min_length=1, description="Ordered dimensions")
    scales: List[str] = Field(..., min_length=1, description="Ordered scales, innermost first")

    @field_validator('scales')
    @classmethod
    def check_scales(cls, v):
        if any(not scale or not scale.strip() for scale in v):
            raise ValueError("Scale labels must be non-empty")
        return v

    @model_validator(mode='after')
    def check_unique_names(self):
        names = self.dimension_names
        duplicated = sorted({name for name in names if names.count(name) > 1})
        if duplicated:
            raise ValueError(f"Duplicate dimension names: {', '.join(duplicated)}")
        duplicated = sorted({scale for scale in self.scales if self.scales.count(scale) > 1})
        if duplicated:
            raise ValueError(f"Duplicate scale labels: {', '.join(duplicated)}")
        return self

    @property
    def dimension_names(self) -> List[str]:
        return [dimension.name for dimension in self.dimensions]

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "center": {"name": "Vecino", "color": "#3366FF"},
                "dimensions": [
                    {"name": "Recursos", "color": "#FF0000"},
                    {"name": "Cultura", "color": "#00FF00"}
                ],
                "scales": ["Persona", "Comunidad", "Institución"]
            }
        }


class MandalaDocument(BaseModel):
    """Configuration plus postit forest, as handed back to the caller for persistence"""
    id: Optional[str] = Field(None, description="Mandala ID")
    name: Optional[str] = Field(None, description="Mandala name")
    configuration: MandalaConfiguration
    postits: List[Postit] = Field(default_factory=list, description="Top-level postits")

    class Config:
        frozen = True
