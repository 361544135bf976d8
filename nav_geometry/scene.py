"""Scene loading and batch evaluation.

A scene file is YAML with two optional mappings::

    segments:
      wall: [[0, 0], [4, 0]]
      ramp: [[0, 0, 0.0], [4, 4, 1.57]]
    points:
      robot: [1, 2]

Endpoints and points are ``[x, y]`` or ``[x, y, theta]``.
"""

import itertools
import logging
from pathlib import Path
from typing import Any, Union

import yaml

from nav_geometry.line_2d import EPS, Line2D
from nav_geometry.models import DistanceResult, IntersectionResult, Scene, SceneReport
from nav_geometry.pose_2d import Pose2D

logger = logging.getLogger(__name__)


class SceneError(ValueError):
    """Raised when a scene file is missing or malformed."""


def _parse_pose(name: str, raw: Any) -> Pose2D:
    if not isinstance(raw, (list, tuple)):
        raise SceneError(f"{name}: expected [x, y] or [x, y, theta], got {raw!r}")
    try:
        return Pose2D.from_array(raw)
    except (TypeError, ValueError) as e:
        raise SceneError(f"{name}: {e}")


def parse_scene(data: Any) -> Scene:
    """Build a Scene from already-loaded YAML data.

    Raises:
        SceneError: If the structure does not match the scene format
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SceneError("Scene root must be a mapping")

    unknown = set(data) - {'segments', 'points'}
    if unknown:
        raise SceneError(f"Unknown scene sections: {sorted(unknown)}")

    segments_raw = data.get('segments') or {}
    points_raw = data.get('points') or {}
    if not isinstance(segments_raw, dict) or not isinstance(points_raw, dict):
        raise SceneError("'segments' and 'points' must be mappings")

    scene = Scene()
    for name, raw in segments_raw.items():
        if not isinstance(raw, (list, tuple)) or len(raw) != 2:
            raise SceneError(f"segment {name}: expected two endpoints, got {raw!r}")
        start = _parse_pose(f"segment {name} start", raw[0])
        end = _parse_pose(f"segment {name} end", raw[1])
        scene.segments[str(name)] = Line2D(start, end)

    for name, raw in points_raw.items():
        scene.points[str(name)] = _parse_pose(f"point {name}", raw)

    return scene


def load_scene(scene_path: Union[str, Path]) -> Scene:
    """Load a scene from a YAML file.

    Args:
        scene_path: Path to the scene file

    Returns:
        Parsed scene

    Raises:
        SceneError: If the file is missing, unparsable or malformed
    """
    path = Path(scene_path)
    if not path.exists():
        raise SceneError(f"Scene file not found: {path}")

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SceneError(f"Failed to parse YAML scene: {e}")

    scene = parse_scene(data)
    logger.info(
        "Loaded scene %s: %d segments, %d points",
        path.name, len(scene.segments), len(scene.points),
    )
    return scene


def evaluate_scene(scene: Scene, eps: float = EPS) -> SceneReport:
    """Intersect every segment pair and measure every point/segment distance.

    Args:
        scene: Scene to evaluate
        eps: Tolerance forwarded to every Line2D query

    Returns:
        SceneReport with pairs in scene declaration order
    """
    report = SceneReport()

    for (name1, line1), (name2, line2) in itertools.combinations(
        scene.segments.items(), 2
    ):
        lines_intersect, _ = Line2D.get_intersection(line1, line2, eps)
        segments_intersect, point = Line2D.get_intersection_within_range(
            line1, line2, eps
        )
        if line1.is_degenerate(eps) or line2.is_degenerate(eps):
            logger.warning("Zero-length segment in pair %s/%s", name1, name2)
        report.intersections.append(IntersectionResult(
            first=name1,
            second=name2,
            lines_intersect=lines_intersect,
            segments_intersect=segments_intersect,
            point=point if segments_intersect else None,
        ))

    for point_name, pose in scene.points.items():
        for segment_name, line in scene.segments.items():
            report.distances.append(DistanceResult(
                point=point_name,
                segment=segment_name,
                line_distance=Line2D.get_distance_from_point_to_line(
                    pose, line, eps
                ),
                segment_distance=Line2D.get_distance_from_point_to_line_within_range(
                    pose, line, eps
                ),
            ))

    logger.debug(
        "Evaluated %d segment pairs, %d point/segment pairs",
        len(report.intersections), len(report.distances),
    )
    return report
