"""Shape mode: a polygonal hole that deforms as it eats.

Vertices are stored as offsets from the hole center, measured at the hole
scale the polygon was created at. Each refresh converts them to absolute
coordinates from the current center and scale, so the polygon follows the
hole rigidly and keeps up with growth earned in the circular modes.

On creation the polygon's area is normalised to the circle of the same
nominal radius (pi * r^2). After that, each swallow pushes one random vertex
outward; the shape is never reset.
"""

from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from holesim.exceptions import DegeneratePolygonError
from holesim.math_utils import Point, Vector2, point_in_polygon, polygon_area
from holesim.modes.interfaces import ModeType, PolygonBoundary
from holesim.util.rng import require_rng_param

if TYPE_CHECKING:
    from holesim.entities import Agent, Hole

logger = logging.getLogger(__name__)

VertexFactory = Callable[[float, random.Random], List[Vector2]]


def regular_polygon_offsets(radius: float, sides: int) -> List[Vector2]:
    """Vertices of a regular polygon of circumradius ``radius`` around the origin."""
    offsets = []
    for i in range(sides):
        angle = (i / sides) * math.pi * 2
        offsets.append(Vector2(math.cos(angle) * radius, math.sin(angle) * radius))
    return offsets


def random_polygon_offsets(
    radius: float,
    rng: random.Random,
    min_sides: int = 5,
    max_sides: int = 8,
    min_radius_ratio: float = 0.5,
) -> List[Vector2]:
    """Star-shaped polygon with evenly spaced angles and random vertex radii.

    Vertex count is drawn from ``[min_sides, max_sides]`` and each vertex radius
    from ``[min_radius_ratio * radius, radius]``.
    """
    sides = rng.randint(min_sides, max_sides)
    offsets = []
    for i in range(sides):
        angle = (i / sides) * math.pi * 2
        r = rng.uniform(radius * min_radius_ratio, radius)
        offsets.append(Vector2(math.cos(angle) * r, math.sin(angle) * r))
    return offsets


def normalize_area(offsets: List[Vector2], radius: float) -> float:
    """Scale ``offsets`` in place so the polygon area equals ``pi * radius**2``.

    Returns:
        The uniform scale factor that was applied

    Raises:
        DegeneratePolygonError: If the polygon has no area
    """
    current_area = polygon_area([p.as_tuple() for p in offsets])
    if current_area <= 0:
        raise DegeneratePolygonError(
            f"Cannot normalise a polygon with area {current_area} "
            f"({len(offsets)} vertices); need at least 3 non-collinear vertices"
        )
    target_area = math.pi * radius * radius
    scale_factor = math.sqrt(target_area / current_area)
    for p in offsets:
        p.update(p.x * scale_factor, p.y * scale_factor)
    return scale_factor


class PolygonMode:
    """Point-in-polygon containment on a persistent, growing polygon.

    The vertex set is generated on the first activation only; later
    activations reuse it so growth history survives mode toggles.
    """

    mode_type = ModeType.SHAPE

    def __init__(
        self,
        hole: "Hole",
        rng: Optional[random.Random],
        vertex_factory: VertexFactory,
    ) -> None:
        self._hole = hole
        self._rng = require_rng_param(rng, "PolygonMode.__init__")
        self._vertex_factory = vertex_factory
        self._offsets: List[Vector2] = []
        self._reference_scale = 1.0
        self._points: Tuple[Point, ...] = ()
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def initialized(self) -> bool:
        return bool(self._offsets)

    @property
    def vertex_count(self) -> int:
        return len(self._offsets)

    @property
    def offsets(self) -> Tuple[Point, ...]:
        """Vertex offsets from the hole center at the current hole scale."""
        factor = self._scale_factor()
        return tuple((p.x * factor, p.y * factor) for p in self._offsets)

    def area(self) -> float:
        return polygon_area(self.offsets)

    def activate(self, now: float) -> None:
        if not self._offsets:
            self._create_polygon()
        self._active = True
        self.refresh_boundary(now)

    def deactivate(self) -> None:
        self._active = False

    def contains(self, agent: "Agent") -> bool:
        return point_in_polygon(agent.x, agent.y, self._points)

    def refresh_boundary(self, now: float) -> None:
        factor = self._scale_factor()
        cx, cy = self._hole.x, self._hole.y
        self._points = tuple((cx + p.x * factor, cy + p.y * factor) for p in self._offsets)

    def boundary(self) -> PolygonBoundary:
        return PolygonBoundary(points=self._points)

    def grow_one_vertex(self, amount: float) -> Optional[int]:
        """Push one randomly chosen vertex ``amount`` units further from the center.

        Returns:
            Index of the vertex that grew, or None if there is no polygon yet
        """
        if not self._offsets:
            return None
        index = self._rng.randrange(len(self._offsets))
        vertex = self._offsets[index]
        length = vertex.length()
        grown = vertex.scale_to_length(length + amount / self._scale_factor())
        vertex.update(grown.x, grown.y)
        return index

    def _scale_factor(self) -> float:
        return self._hole.scale / self._reference_scale

    def _create_polygon(self) -> None:
        radius = self._hole.scaled_radius
        offsets = self._vertex_factory(radius, self._rng)
        try:
            normalize_area(offsets, radius)
        except DegeneratePolygonError:
            logger.error("Shape mode polygon is degenerate; aborting activation")
            raise
        self._offsets = offsets
        self._reference_scale = self._hole.scale
        logger.debug(
            "Created %d-vertex hole polygon at radius %.1f", len(offsets), radius
        )
