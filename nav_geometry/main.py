"""Command-line entry point for evaluating geometry scenes.

Loads a YAML scene of named segments and probe points, runs every segment
intersection and point/segment distance query, and logs the results.
"""

import argparse
import logging
import sys
from typing import List, Optional

from nav_geometry.config import ConfigError, load_config, merge_config_overrides, print_config
from nav_geometry.models import SceneReport
from nav_geometry.scene import SceneError, evaluate_scene, load_scene
from nav_geometry.utils.logger import setup_logger


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (None = ``sys.argv[1:]``)

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="2D geometry scene evaluator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Evaluate the bundled crossing scene
  python -m nav_geometry.main --scene config/scenes/crossing.yaml

  # Looser tolerance, debug output
  python -m nav_geometry.main --scene my_scene.yaml --eps 1e-6 -v
        """
    )

    parser.add_argument(
        '--scene',
        type=str,
        required=True,
        help='Scene YAML file with segments and points'
    )
    parser.add_argument(
        '-c', '--config',
        type=str,
        default=None,
        help='Configuration file path (default: config/default_config.yaml)'
    )
    parser.add_argument(
        '--eps',
        type=float,
        default=None,
        help='Override geometry.eps comparison tolerance'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable DEBUG logging'
    )

    return parser.parse_args(argv)


def log_report(report: SceneReport, logger: logging.Logger) -> None:
    """Write one log line per result."""
    for result in report.intersections:
        if result.segments_intersect:
            logger.info(
                "%s x %s: intersect at %s", result.first, result.second, result.point
            )
        elif result.lines_intersect:
            logger.info(
                "%s x %s: lines cross outside the segments",
                result.first, result.second,
            )
        else:
            logger.info("%s x %s: parallel", result.first, result.second)

    for result in report.distances:
        logger.info(
            "%s -> %s: line %.6f, segment %.6f",
            result.point, result.segment,
            result.line_distance, result.segment_distance,
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    args = parse_arguments(argv)

    try:
        config = load_config(args.config)
        if args.eps is not None:
            config = merge_config_overrides(config, {'geometry.eps': args.eps})
    except ConfigError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    log_level = 'DEBUG' if args.verbose else config.logging.level  # type: ignore

    try:
        logger = setup_logger(
            name='nav_geometry',
            level=log_level,
            log_file=config.logging.log_file,  # type: ignore
            log_to_console=config.logging.log_to_console,  # type: ignore
        )
    except ValueError as e:
        print(f"Error configuring logging: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        logger.debug("Full configuration:")
        print_config(config)

    eps = float(config.geometry.eps)  # type: ignore
    try:
        scene = load_scene(args.scene)
    except SceneError as e:
        logger.error(f"Failed to load scene: {e}")
        return 1

    report = evaluate_scene(scene, eps=eps)
    log_report(report, logger)

    logger.info("=" * 60)
    logger.info(
        f"{len(report.crossing_pairs)} of {len(report.intersections)} "
        f"segment pairs intersect"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
