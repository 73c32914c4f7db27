"""Cross-wall analysis: footprint corners shared by wall endpoints."""

from __future__ import annotations

from shellframer.models import BuildingContext, Corner, Point3D


class WallAnalyzer:
    """Detects the unique corner points of the walls' footprint."""

    def analyze(self, context: BuildingContext) -> None:
        """Run all analysis passes and populate the context."""
        context.corners = self._detect_corners(context)

    def _detect_corners(self, context: BuildingContext) -> list[Corner]:
        """Collect wall start/end points, merging those within tolerance.

        Order follows the walls, so the result is deterministic.
        """
        corners: list[Corner] = []
        tolerance = context.tolerance

        for wall in context.walls:
            if wall.length <= tolerance:
                continue
            for pt in (wall.start, wall.end):
                match = self._find(corners, pt, tolerance)
                if match is None:
                    corners.append(Corner(point=pt, wall_names=[wall.name]))
                elif wall.name not in match.wall_names:
                    match.wall_names.append(wall.name)

        return corners

    def _find(self, corners: list[Corner], pt: Point3D, tolerance: float) -> Corner | None:
        for corner in corners:
            if corner.point.distance_to(pt) <= tolerance:
                return corner
        return None
