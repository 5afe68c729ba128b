"""
Placement Engine
================

Places postits inside their (dimension, scale) cell of the mandala.

Geometry:
- Dimension i of D owns the angles [i * 2pi/D, (i + 1) * 2pi/D)
- Scale j of S owns the radii [j/S, (j + 1)/S), scale 0 being the innermost band
- The cell of (dimension, scale) is the wedge where both ranges intersect

The first postit of a cell goes to the exact cell center. Later postits are
placed with a greedy farthest-candidate heuristic: a fixed number of random
candidates is drawn inside the cell and the one whose nearest already-placed
point (in any cell) is farthest away wins.

@author lycosa9527
@made_by MindSpring Team
"""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from config.settings import config
from models.postits import Coordinate, Postit
from services.exceptions import NoValidPostitsError

logger = logging.getLogger(__name__)

FULL_TURN = 2 * math.pi


@dataclass
class CellBounds:
    """Polar rectangle owned by one (dimension, scale) pair"""
    start_angle: float
    end_angle: float
    min_radius: float
    max_radius: float

    @property
    def angle_span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def radius_span(self) -> float:
        return self.max_radius - self.min_radius

    def contains(self, coordinate: Coordinate) -> bool:
        """Whether a Cartesian point lies in this cell (half-open on both axes)."""
        radius = math.hypot(coordinate.x, coordinate.y)
        # The origin is a shared vertex of every inner cell
        if radius == 0:
            return False
        angle = math.atan2(coordinate.y, coordinate.x) % FULL_TURN
        return (
            self.min_radius <= radius < self.max_radius
            and self.start_angle <= angle < self.end_angle
        )


@dataclass
class BatchPlacement:
    """Outcome of a batch placement: placed postits and those with unknown labels"""
    placed: List[Postit] = field(default_factory=list)
    unplaced: List[Postit] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.placed) + len(self.unplaced)


def polar_to_coordinate(angle: float, radius: float) -> Coordinate:
    """Build a Coordinate carrying both Cartesian and polar form."""
    return Coordinate(
        x=radius * math.cos(angle),
        y=radius * math.sin(angle),
        angle=angle,
        percentile_distance=radius,
    )


def min_squared_distance(candidate: Coordinate, placed: Sequence[Coordinate]) -> float:
    """Squared distance from candidate to its nearest placed point (inf if none)."""
    if not placed:
        return math.inf
    return min(candidate.squared_distance_to(point) for point in placed)


def select_farthest_candidate(
    candidates: Sequence[Coordinate],
    placed: Sequence[Coordinate],
) -> Optional[Coordinate]:
    """
    Pick the candidate whose nearest placed point is farthest away.

    Ties keep the earliest candidate. Returns None for an empty candidate list.
    """
    best_candidate = None
    max_min_distance = -math.inf
    for candidate in candidates:
        distance = min_squared_distance(candidate, placed)
        if distance > max_min_distance:
            max_min_distance = distance
            best_candidate = candidate
    return best_candidate


class PlacementEngine:
    """
    Computes postit coordinates on the mandala.

    Features:
    - Deterministic centering of the first postit in a cell
    - Farthest-candidate spreading of later postits across the whole batch
    - Explicit caller coordinates always take priority for single placement
    - Injectable random source for reproducible layouts
    """

    def __init__(self, attempts: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize placement engine.

        Args:
            attempts: Candidates per placement (defaults to PLACEMENT_CANDIDATE_ATTEMPTS)
            rng: Random source (defaults to one seeded with PLACEMENT_RANDOM_SEED)
        """
        self._attempts = attempts
        self.rng = rng if rng is not None else random.Random(config.PLACEMENT_RANDOM_SEED)

    @property
    def attempts(self) -> int:
        if self._attempts is not None:
            return self._attempts
        return config.PLACEMENT_CANDIDATE_ATTEMPTS

    # ============================================================================
    # GEOMETRY
    # ============================================================================

    def cell_bounds(
        self,
        dimension: str,
        scale: str,
        dimensions: Sequence[str],
        scales: Sequence[str],
    ) -> Optional[CellBounds]:
        """Bounds of the cell for (dimension, scale), None if either label is unknown."""
        if dimension not in dimensions or scale not in scales:
            return None

        dimension_index = list(dimensions).index(dimension)
        scale_index = list(scales).index(scale)
        angle_span = FULL_TURN / len(dimensions)
        start_angle = dimension_index * angle_span
        return CellBounds(
            start_angle=start_angle,
            end_angle=start_angle + angle_span,
            min_radius=scale_index / len(scales),
            max_radius=(scale_index + 1) / len(scales),
        )

    def cell_center(
        self,
        dimension: str,
        scale: str,
        dimensions: Sequence[str],
        scales: Sequence[str],
    ) -> Optional[Coordinate]:
        """Exact geometric center (mid angle, mid radius) of the cell."""
        bounds = self.cell_bounds(dimension, scale, dimensions, scales)
        if bounds is None:
            return None
        angle = (bounds.start_angle + bounds.end_angle) / 2
        radius = (bounds.min_radius + bounds.max_radius) / 2
        return polar_to_coordinate(angle, radius)

    def random_coordinates(
        self,
        dimension: str,
        scale: str,
        dimensions: Sequence[str],
        scales: Sequence[str],
        rng: Optional[random.Random] = None,
    ) -> Optional[Coordinate]:
        """
        Random point inside the cell, None if either label is unknown.

        Angle and radius are each uniform within the cell, so points are
        slightly denser towards the inner edge of a band than a uniform-area
        sample would be.
        """
        bounds = self.cell_bounds(dimension, scale, dimensions, scales)
        if bounds is None:
            return None
        rng = rng or self.rng
        angle = bounds.start_angle + rng.random() * bounds.angle_span
        radius = bounds.min_radius + rng.random() * bounds.radius_span
        return polar_to_coordinate(angle, radius)

    # ============================================================================
    # PLACEMENT
    # ============================================================================

    def place_one(
        self,
        dimension: str,
        scale: str,
        dimensions: Sequence[str],
        scales: Sequence[str],
        cell_coordinates: Sequence[Coordinate],
        all_coordinates: Sequence[Coordinate],
        attempts: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> Optional[Coordinate]:
        """
        Place one postit in its cell.

        Args:
            dimension: Dimension name of the postit
            scale: Scale label of the postit
            dimensions: Ordered dimension names
            scales: Ordered scale labels
            cell_coordinates: Coordinates already placed in this cell
            all_coordinates: Coordinates already placed anywhere
            attempts: Candidates to sample (defaults to the engine setting)
            rng: Random source for this call

        Returns:
            The chosen Coordinate, or None when the label is not configured
        """
        if dimension not in dimensions or scale not in scales:
            logger.debug(f"[PlacementEngine] No placement for unknown label ({dimension}, {scale})")
            return None

        if not cell_coordinates:
            return self.cell_center(dimension, scale, dimensions, scales)

        attempts = self.attempts if attempts is None else attempts
        candidates = [
            self.random_coordinates(dimension, scale, dimensions, scales, rng=rng)
            for _ in range(max(1, attempts))
        ]
        return select_farthest_candidate(candidates, all_coordinates)

    def place_batch(
        self,
        postits: Sequence[Postit],
        dimensions: Sequence[str],
        scales: Sequence[str],
        rng: Optional[random.Random] = None,
    ) -> BatchPlacement:
        """
        Place a batch of postits.

        Postits are grouped by (dimension, section) in order of first
        appearance; arrival order is kept within a group. Distances are
        measured against every point placed so far in the batch.

        Returns:
            BatchPlacement with placed postits (in group order) and the
            postits whose labels are not configured

        Raises:
            NoValidPostitsError: If no postit at all could be placed
        """
        groups: Dict[Tuple[str, str], List[Postit]] = {}
        for postit in postits:
            groups.setdefault((postit.dimension, postit.section), []).append(postit)

        result = BatchPlacement()
        all_coordinates: List[Coordinate] = []

        for (dimension, section), members in groups.items():
            cell_coordinates: List[Coordinate] = []
            for postit in members:
                coordinates = self.place_one(
                    dimension,
                    section,
                    dimensions,
                    scales,
                    cell_coordinates,
                    all_coordinates,
                    rng=rng,
                )
                if coordinates is None:
                    result.unplaced.append(postit)
                    continue
                result.placed.append(postit.model_copy(update={"coordinates": coordinates}))
                cell_coordinates.append(coordinates)
                all_coordinates.append(coordinates)

        if result.unplaced:
            logger.warning(
                f"[PlacementEngine] {len(result.unplaced)}/{result.total} postits have labels "
                f"outside the mandala configuration"
            )

        if not result.placed:
            raise NoValidPostitsError(
                "No valid postits were generated",
                {"total_postits": len(postits)}
            )

        logger.info(f"[PlacementEngine] Placed {len(result.placed)} postits in {len(groups)} cells")
        return result

    def place_single(
        self,
        postit: Postit,
        dimensions: Sequence[str],
        scales: Sequence[str],
        existing_coordinates: Sequence[Coordinate],
        rng: Optional[random.Random] = None,
    ) -> Coordinate:
        """
        Position for one postit added outside a batch.

        An explicit coordinate on the postit is returned verbatim. Otherwise a
        valid label is placed against every existing coordinate, the cell's
        own occupants being those existing points that fall inside it. An
        unknown label falls back to the origin.
        """
        if postit.coordinates is not None:
            return postit.coordinates

        bounds = self.cell_bounds(postit.dimension, postit.section, dimensions, scales)
        if bounds is None:
            logger.warning(
                f"[PlacementEngine] Postit {postit.id} has unknown label "
                f"({postit.dimension}, {postit.section}), using origin"
            )
            return Coordinate.origin()

        cell_coordinates = [point for point in existing_coordinates if bounds.contains(point)]
        return self.place_one(
            postit.dimension,
            postit.section,
            dimensions,
            scales,
            cell_coordinates,
            existing_coordinates,
            rng=rng,
        )


# Global placement engine instance
placement_engine = PlacementEngine()
