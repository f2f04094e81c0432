"""
Geometry data models.

Contains the polygon DTO used for roof and ground catchment outlines.
"""

from dataclasses import dataclass
from typing import Tuple

LatLng = Tuple[float, float]


@dataclass(frozen=True)
class Polygon:
    """Ordered ring of (lat, lng) vertices; the ring is implicitly closed."""

    vertices: Tuple[LatLng, ...]

    @property
    def ring(self) -> Tuple[LatLng, ...]:
        """Vertices with the first vertex repeated at the end if not already."""
        if not self.vertices:
            return ()
        if self.vertices[0] != self.vertices[-1]:
            return self.vertices + (self.vertices[0],)
        return self.vertices

    @property
    def distinct_vertices(self) -> Tuple[LatLng, ...]:
        """Vertices without the closing duplicate or repeated points."""
        seen = []
        for vertex in self.vertices:
            if vertex not in seen:
                seen.append(vertex)
        return tuple(seen)

    @property
    def is_degenerate(self) -> bool:
        """True when the ring cannot enclose any area (< 3 distinct vertices)."""
        return len(self.distinct_vertices) < 3

    def to_list(self):
        return [{"lat": lat, "lng": lng} for lat, lng in self.vertices]
