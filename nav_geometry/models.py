"""Result data models for batch geometry evaluation.

This module defines the structures produced by the scene evaluator:
- Scene: Named segments and probe points loaded from a scene file
- IntersectionResult: Outcome of intersecting one pair of segments
- DistanceResult: Distances from one probe point to one segment
- SceneReport: All results for a scene
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from nav_geometry.line_2d import Line2D
from nav_geometry.pose_2d import Pose2D


@dataclass
class Scene:
    """Named geometry to evaluate.

    Attributes:
        segments: Segment name -> Line2D
        points: Probe point name -> Pose2D
    """
    segments: Dict[str, Line2D] = field(default_factory=dict)
    points: Dict[str, Pose2D] = field(default_factory=dict)


@dataclass
class IntersectionResult:
    """Intersection of two named segments.

    Attributes:
        first: Name of the first segment
        second: Name of the second segment
        lines_intersect: Whether the infinite lines cross (not parallel)
        segments_intersect: Whether the crossing lies on both segments
        point: Crossing point, set only when ``segments_intersect`` holds
    """
    first: str
    second: str
    lines_intersect: bool
    segments_intersect: bool
    point: Optional[Pose2D] = None


@dataclass
class DistanceResult:
    """Distances from a probe point to a segment.

    Attributes:
        point: Name of the probe point
        segment: Name of the segment
        line_distance: Perpendicular distance to the infinite line
        segment_distance: Distance to the closest point of the segment
    """
    point: str
    segment: str
    line_distance: float
    segment_distance: float


@dataclass
class SceneReport:
    """Every pairwise result for a scene, in evaluation order."""
    intersections: List[IntersectionResult] = field(default_factory=list)
    distances: List[DistanceResult] = field(default_factory=list)

    @property
    def crossing_pairs(self) -> List[IntersectionResult]:
        """Pairs whose segments actually intersect."""
        return [r for r in self.intersections if r.segments_intersect]
