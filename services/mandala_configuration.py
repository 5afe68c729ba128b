"""
Mandala Configuration Service
=============================

Helpers over mandala configurations:
- Resolving the effective dimensions/scales of a request
- Validating and merging ("overlapping") mandalas that share their axes

@author lycosa9527
@made_by MindSpring Team
"""

import logging
from typing import List, Optional, Sequence, Tuple

from config.mandala_config import (
    COMPOSITE_CENTER_NAME,
    COMPOSITE_CENTER_DESCRIPTION,
    MIN_OVERLAP_MANDALAS,
)
from models.mandala import MandalaCenter, MandalaConfiguration, MandalaDocument
from models.postits import PostitSource
from services.exceptions import ConfigurationMismatchError, InvalidConfigurationError
from services.postit_tree import assert_unique_ids
from utils.color_utils import calculate_average_color

logger = logging.getLogger(__name__)


def get_effective_dimensions_and_scales(
    configuration: MandalaConfiguration,
    dimensions: Optional[Sequence[str]] = None,
    scales: Optional[Sequence[str]] = None,
) -> Tuple[List[str], List[str]]:
    """
    Resolve which dimensions and scales a request targets.

    Args:
        configuration: The mandala configuration
        dimensions: Requested dimensions; None or empty means all of them
        scales: Requested scales; None or empty means all of them

    Returns:
        (effective_dimensions, effective_scales)

    Raises:
        InvalidConfigurationError: If a requested name is not configured
    """
    available_dimensions = configuration.dimension_names
    available_scales = list(configuration.scales)

    if not dimensions:
        effective_dimensions = available_dimensions
    else:
        invalid_dimensions = [dim for dim in dimensions if dim not in available_dimensions]
        if invalid_dimensions:
            raise InvalidConfigurationError(
                f"Invalid dimensions provided: {', '.join(invalid_dimensions)}. "
                f"Available dimensions: {', '.join(available_dimensions)}",
                {
                    "invalid_dimensions": invalid_dimensions,
                    "available_dimensions": available_dimensions,
                }
            )
        effective_dimensions = list(dimensions)

    if not scales:
        effective_scales = available_scales
    else:
        invalid_scales = [scale for scale in scales if scale not in available_scales]
        if invalid_scales:
            raise InvalidConfigurationError(
                f"Invalid scales provided: {', '.join(invalid_scales)}. "
                f"Available scales: {', '.join(available_scales)}",
                {
                    "invalid_scales": invalid_scales,
                    "available_scales": available_scales,
                }
            )
        effective_scales = list(scales)

    return effective_dimensions, effective_scales


def validate_same_dimensions(configurations: Sequence[MandalaConfiguration]) -> None:
    """
    Check that every configuration has the same dimension names (any order).

    Raises:
        ConfigurationMismatchError: On the first configuration that differs
    """
    if len(configurations) < 2:
        return

    expected = sorted(configurations[0].dimension_names)
    for index, configuration in enumerate(configurations[1:], start=1):
        actual = sorted(configuration.dimension_names)
        if actual != expected:
            raise ConfigurationMismatchError(
                "All mandalas must have the same dimensions to be overlapped",
                {
                    "mandala_index": index,
                    "expected_dimensions": expected,
                    "actual_dimensions": actual,
                }
            )


def validate_same_scales(configurations: Sequence[MandalaConfiguration]) -> None:
    """
    Check that every configuration has the same scale labels (any order).

    Raises:
        ConfigurationMismatchError: On the first configuration that differs
    """
    if len(configurations) < 2:
        return

    expected = sorted(configurations[0].scales)
    for index, configuration in enumerate(configurations[1:], start=1):
        actual = sorted(configuration.scales)
        if actual != expected:
            raise ConfigurationMismatchError(
                "All mandalas must have the same scales to be overlapped",
                {
                    "mandala_index": index,
                    "expected_scales": expected,
                    "actual_scales": actual,
                }
            )


def overlap_configurations(configurations: Sequence[MandalaConfiguration]) -> MandalaConfiguration:
    """
    Merge configurations sharing dimensions and scales into one.

    Axes are taken from the first configuration. The center is a composite
    whose color is the average of the source centers' colors.

    Raises:
        ConfigurationMismatchError: If fewer than two are given or the axes differ
    """
    if len(configurations) < MIN_OVERLAP_MANDALAS:
        raise ConfigurationMismatchError(
            f"At least {MIN_OVERLAP_MANDALAS} mandalas are required for overlap operation",
            {"mandala_count": len(configurations)}
        )

    validate_same_dimensions(configurations)
    validate_same_scales(configurations)

    centers = [configuration.center for configuration in configurations if configuration.center]
    count = len(configurations)
    composite_center = None
    if centers:
        composite_center = MandalaCenter(
            name=COMPOSITE_CENTER_NAME.format(count=count),
            description=COMPOSITE_CENTER_DESCRIPTION.format(count=count),
            color=calculate_average_color([center.color for center in centers]),
        )

    first = configurations[0]
    logger.info(
        f"[MandalaConfiguration] Overlapped {count} mandalas with dimensions "
        f"[{', '.join(first.dimension_names)}] and scales [{', '.join(first.scales)}]"
    )
    return MandalaConfiguration(
        center=composite_center,
        dimensions=list(first.dimensions),
        scales=list(first.scales),
    )


def overlap_documents(documents: Sequence[MandalaDocument]) -> MandalaDocument:
    """
    Overlap several mandalas: merged configuration plus every source forest.

    Each top-level postit is tagged with the id and name of the mandala it
    came from; its descendants travel with it.

    Raises:
        ConfigurationMismatchError: If fewer than two are given or the axes differ
        DuplicatePostitIdError: If two sources share a postit id
    """
    configuration = overlap_configurations([document.configuration for document in documents])
    postits = []
    for document in documents:
        source = PostitSource(id=document.id, name=document.name)
        postits.extend(postit.model_copy(update={"source": source}) for postit in document.postits)
        logger.debug(
            f"[MandalaConfiguration] Added {len(document.postits)} top-level postits "
            f"from mandala {document.name or document.id or '-'}"
        )
    assert_unique_ids(postits)
    logger.info(f"[MandalaConfiguration] Total postits to overlap: {len(postits)}")
    return MandalaDocument(configuration=configuration, postits=postits)
