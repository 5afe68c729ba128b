"""
Common Pydantic Models
======================

Shared models and validators used by mandala and postit models.

Author: lycosa9527
Made by: MindSpring Team
"""

from pydantic import BaseModel, Field, field_validator

from utils.color_utils import is_hex_color


def validate_hex_color(value: str) -> str:
    """Validate a 6-digit hex color and normalize it to '#RRGGBB'."""
    if not is_hex_color(value):
        raise ValueError(f"Invalid hex color: {value}")
    return value if value.startswith('#') else f"#{value}"


class Tag(BaseModel):
    """Tag attached to a postit (name plus display color)"""
    name: str = Field(..., min_length=1, description="Tag name")
    color: str = Field(..., description="Tag color in hex format")

    @field_validator('color')
    @classmethod
    def check_color(cls, v):
        return validate_hex_color(v)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"name": "Urgente", "color": "#FF0000"}
        }
