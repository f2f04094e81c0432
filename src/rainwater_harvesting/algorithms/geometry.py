"""
Geometry analysis for catchment polygons.

Computes areas, bounding boxes, centroids and perimeters of lat/lng rings.
Point-to-point distances use the haversine formula; the ring area uses the
spherical excess formula on the WGS84 equatorial radius.

A polygon with fewer than 3 distinct vertices encloses no area; area and
perimeter report 0 and callers treat it as "no geometry".
"""

import math
from typing import Dict, Optional

from ..core import constants, round_half_up
from ..models import Polygon, LatLng


class GeometryAnalyzer:
    """Stateless geometry helpers for catchment outlines."""

    @staticmethod
    def haversine_meters(a: LatLng, b: LatLng) -> float:
        """
        Great-circle distance between two points.

        Args:
            a: (lat, lng) of the first point in degrees
            b: (lat, lng) of the second point in degrees

        Returns:
            Distance in meters
        """
        lat1, lng1 = math.radians(a[0]), math.radians(a[1])
        lat2, lng2 = math.radians(b[0]), math.radians(b[1])
        sin_dlat = math.sin((lat2 - lat1) / 2)
        sin_dlng = math.sin((lng2 - lng1) / 2)
        aa = sin_dlat * sin_dlat + math.cos(lat1) * math.cos(lat2) * sin_dlng * sin_dlng
        c = 2 * math.atan2(math.sqrt(aa), math.sqrt(1 - aa))
        return constants.EARTH_RADIUS_HAVERSINE_M * c

    @staticmethod
    def degrees_lat_to_meters(degrees: float) -> float:
        return degrees * constants.METERS_PER_DEGREE_LAT

    @staticmethod
    def degrees_lng_to_meters(degrees: float, at_lat: float) -> float:
        return degrees * constants.METERS_PER_DEGREE_LAT * math.cos(math.radians(at_lat))

    @staticmethod
    def area(polygon: Polygon) -> float:
        """
        Geodesic area of the ring.

        Args:
            polygon: Catchment outline

        Returns:
            Area in m² (0 for a degenerate polygon)
        """
        if polygon.is_degenerate:
            return 0.0

        ring = polygon.ring
        total = 0.0
        for (lat1, lng1), (lat2, lng2) in zip(ring, ring[1:]):
            total += math.radians(lng2 - lng1) * (
                2 + math.sin(math.radians(lat1)) + math.sin(math.radians(lat2))
            )

        radius = constants.EARTH_RADIUS_GEODESIC_M
        return abs(total * radius * radius / 2.0)

    @staticmethod
    def bbox(polygon: Polygon) -> Optional[Dict[str, float]]:
        """Bounding box of the vertices, or None for an empty polygon."""
        if not polygon.vertices:
            return None

        lats = [lat for lat, _ in polygon.vertices]
        lngs = [lng for _, lng in polygon.vertices]
        return {
            "min_lat": min(lats),
            "max_lat": max(lats),
            "min_lng": min(lngs),
            "max_lng": max(lngs),
        }

    @staticmethod
    def bbox_dims_meters(polygon: Polygon) -> Dict[str, float]:
        """
        Bounding box width and height in meters.

        Width is measured along the min-latitude edge and height along the
        min-longitude edge, both with haversine distance.

        Args:
            polygon: Catchment outline

        Returns:
            Dictionary with width_m and height_m (cm precision)
        """
        box = GeometryAnalyzer.bbox(polygon)
        if box is None:
            return {"width_m": 0.0, "height_m": 0.0}

        corner = (box["min_lat"], box["min_lng"])
        width = GeometryAnalyzer.haversine_meters(corner, (box["min_lat"], box["max_lng"]))
        height = GeometryAnalyzer.haversine_meters(corner, (box["max_lat"], box["min_lng"]))
        return {"width_m": round_half_up(width, 2), "height_m": round_half_up(height, 2)}

    @staticmethod
    def bbox_diagonal_meters(polygon: Polygon) -> float:
        dims = GeometryAnalyzer.bbox_dims_meters(polygon)
        return math.hypot(dims["width_m"], dims["height_m"])

    @staticmethod
    def bbox_area(polygon: Polygon) -> float:
        """
        Flat bounding-box area approximation.

        Longitude degrees are scaled at the polygon's mean latitude.
        """
        if polygon.is_degenerate:
            return 0.0

        box = GeometryAnalyzer.bbox(polygon)
        mean_lat = GeometryAnalyzer.centroid(polygon)[0]
        height = GeometryAnalyzer.degrees_lat_to_meters(box["max_lat"] - box["min_lat"])
        width = abs(GeometryAnalyzer.degrees_lng_to_meters(box["max_lng"] - box["min_lng"], mean_lat))
        return width * height

    @staticmethod
    def centroid(polygon: Polygon) -> Optional[LatLng]:
        """Vertex mean of the distinct vertices, or None for an empty polygon."""
        vertices = polygon.distinct_vertices
        if not vertices:
            return None

        lat = sum(v[0] for v in vertices) / len(vertices)
        lng = sum(v[1] for v in vertices) / len(vertices)
        return (lat, lng)

    @staticmethod
    def perimeter(polygon: Polygon) -> float:
        """Haversine length of the closed ring in meters (0 if degenerate)."""
        if polygon.is_degenerate:
            return 0.0

        ring = polygon.ring
        return sum(
            GeometryAnalyzer.haversine_meters(a, b) for a, b in zip(ring, ring[1:])
        )
