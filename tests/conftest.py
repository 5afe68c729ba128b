"""
Pytest Configuration
====================

Ensures project root is in Python path for imports and provides shared
mandala fixtures.

@author lycosa9527
@made_by MindSpring Team
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from models import Coordinate, Dimension, MandalaCenter, MandalaConfiguration, MandalaDocument, Postit, Tag


@pytest.fixture
def rng():
    """Seeded random source for reproducible placement."""
    return random.Random(1234)


@pytest.fixture
def configuration():
    """Three dimensions, two scales."""
    return MandalaConfiguration(
        center=MandalaCenter(name="Vecino", color="#3366FF"),
        dimensions=[
            Dimension(name="A", color="#FF0000"),
            Dimension(name="B", color="#00FF00"),
            Dimension(name="C", color="#0000FF"),
        ],
        scales=["Inner", "Outer"],
    )


@pytest.fixture
def project_tags():
    return [
        Tag(name="Urgente", color="#FF0000"),
        Tag(name="Idea", color="#00AA00"),
    ]


def make_postit(postit_id, children=None, dimension="A", section="Inner", coordinates=None, content=None):
    """Build a postit with a fixed id."""
    return Postit(
        id=postit_id,
        content=content or f"Postit {postit_id}",
        dimension=dimension,
        section=section,
        coordinates=coordinates,
        children=children or [],
    )


@pytest.fixture
def forest():
    """
    a
    ├── b
    │   ├── d
    │   └── e
    └── c
        └── f
    g
    """
    return [
        make_postit("a", [
            make_postit("b", [make_postit("d"), make_postit("e")]),
            make_postit("c", [make_postit("f")]),
        ], coordinates=Coordinate(x=0.1, y=0.1)),
        make_postit("g", dimension="B", section="Outer", coordinates=Coordinate(x=-0.5, y=0.5)),
    ]


@pytest.fixture
def document(configuration, forest):
    return MandalaDocument(configuration=configuration, postits=forest)


@pytest.fixture
def postit_factory():
    """Factory building postits with fixed ids."""
    return make_postit


@pytest.fixture
def fresh_config():
    """Global config with its cache cleared before and after the test."""
    from config.settings import config

    config.clear_cache()
    yield config
    config.clear_cache()
