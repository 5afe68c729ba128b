"""
Unit tests for mandala and postit models
========================================

@author lycosa9527
@made_by MindSpring Team
"""

import pytest
from pydantic import ValidationError

from models import Coordinate, Dimension, MandalaConfiguration, Postit, PostitDraft, Tag


class TestMandalaConfiguration:
    """Test configuration validation."""

    def test_valid_configuration(self, configuration):
        assert configuration.dimension_names == ["A", "B", "C"]
        assert configuration.center.name == "Vecino"

    def test_requires_dimensions_and_scales(self):
        with pytest.raises(ValidationError):
            MandalaConfiguration(dimensions=[], scales=["Inner"])
        with pytest.raises(ValidationError):
            MandalaConfiguration(dimensions=[Dimension(name="A", color="#FF0000")], scales=[])

    def test_rejects_blank_scale(self):
        with pytest.raises(ValidationError):
            MandalaConfiguration(dimensions=[Dimension(name="A", color="#FF0000")], scales=["Inner", " "])

    def test_rejects_duplicate_dimension_names(self):
        with pytest.raises(ValidationError, match="Duplicate dimension names: A"):
            MandalaConfiguration(
                dimensions=[Dimension(name="A", color="#FF0000"), Dimension(name="A", color="#00FF00")],
                scales=["Inner"],
            )

    def test_rejects_duplicate_scales(self):
        with pytest.raises(ValidationError, match="Duplicate scale labels: Inner"):
            MandalaConfiguration(
                dimensions=[Dimension(name="A", color="#FF0000")],
                scales=["Inner", "Inner"],
            )

    def test_is_frozen(self, configuration):
        with pytest.raises(ValidationError):
            configuration.scales = ["Other"]


class TestColors:
    """Test hex color validation on models."""

    def test_color_without_hash_is_normalized(self):
        assert Tag(name="Idea", color="00AA00").color == "#00AA00"

    @pytest.mark.parametrize("color", ["red", "#FFF", "#GG0000", "", "#FF00000"])
    def test_invalid_colors(self, color):
        with pytest.raises(ValidationError):
            Dimension(name="A", color=color)


class TestPostit:
    """Test postit defaults and immutability."""

    def test_defaults(self):
        postit = Postit(content="Texto", dimension="A", section="Inner")

        assert postit.id
        assert postit.tags == []
        assert postit.children == []
        assert postit.coordinates is None

    def test_ids_are_unique(self):
        first = Postit(content="x", dimension="A", section="Inner")
        second = Postit(content="x", dimension="A", section="Inner")

        assert first.id != second.id

    def test_nested_children_from_dict(self):
        postit = Postit.model_validate({
            "id": "root",
            "content": "Raíz",
            "dimension": "A",
            "section": "Inner",
            "children": [{"id": "leaf", "content": "Hoja", "dimension": "A", "section": "Outer"}],
        })

        assert postit.children[0].id == "leaf"
        assert isinstance(postit.children[0], Postit)

    def test_is_frozen(self):
        postit = Postit(content="x", dimension="A", section="Inner")

        with pytest.raises(ValidationError):
            postit.content = "y"

    def test_draft_requires_content(self):
        with pytest.raises(ValidationError):
            PostitDraft(content="", dimension="A", section="Inner")


class TestCoordinate:
    """Test coordinate helpers."""

    def test_origin(self):
        origin = Coordinate.origin()

        assert (origin.x, origin.y) == (0.0, 0.0)
        assert origin.angle is None

    def test_squared_distance(self):
        assert Coordinate(x=0.3, y=0.0).squared_distance_to(Coordinate(x=0.0, y=0.4)) == pytest.approx(0.25)

    def test_percentile_distance_bounds(self):
        with pytest.raises(ValidationError):
            Coordinate(x=0.0, y=0.0, percentile_distance=1.5)
