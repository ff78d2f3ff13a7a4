"""
Render a YAML scene to a PNG image.

Usage:
    python run_render.py config/scene_example.yaml
    python run_render.py config/scene_example.yaml -o out.png --draw-bounds
"""

import argparse
import logging
import sys
from pathlib import Path

import cv2

from shape_raster import SceneConfig, SceneRenderer
from shape_raster.logging import LogEvent, create_logger
from utils import get_target_run_folder

logger = create_logger("cli")


def render_scene(scene_path: Path, output_path: Path, draw_bounds: bool = False) -> Path:
    """
    Load a scene, render it and write the image.

    Args:
        scene_path: YAML scene description
        output_path: Target image path (format from extension)
        draw_bounds: Overlay each shape's bounding box

    Returns:
        The written image path

    Raises:
        OSError: If OpenCV fails to write the image
    """
    config = SceneConfig.from_yaml(scene_path)
    shapes = config.build_shapes()

    renderer = SceneRenderer(background=config.background_color())
    frame = renderer.render(shapes, canvas_wh=config.canvas_wh)
    if draw_bounds:
        frame = renderer.draw_bounding_boxes(frame, shapes)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(output_path), frame):
        error = OSError(f"Failed to write image: {output_path}")
        logger.error(
            event=LogEvent.OUTPUT_ERROR,
            message="Failed to write rendered frame",
            metadata={'output': str(output_path)},
            exc_info=error,
        )
        raise error

    logger.info(
        event=LogEvent.SCENE_SAVED,
        message=f"Scene written to {output_path}",
        metadata={'output': str(output_path), 'shape_count': len(shapes)},
    )
    return output_path


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Rasterize circles and polygons from a YAML scene",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render into ./runs/render/<timestamp>/output.png
  python run_render.py config/scene_example.yaml

  # Explicit output with bounding-box overlay
  python run_render.py config/scene_example.yaml -o scene.png --draw-bounds
"""
    )
    parser.add_argument('scene', help='Path to scene YAML')
    parser.add_argument(
        '-o', '--output',
        default=None,
        help='Output image path (default: ./runs/render/<timestamp>/output.png)'
    )
    parser.add_argument(
        '--draw-bounds',
        action='store_true',
        help='Overlay shape bounding boxes'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log every shape created and rendered'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        for component in ("shapes", "renderer", "config", "cli"):
            create_logger(component, level=logging.DEBUG)

    if args.output is None:
        output_path = get_target_run_folder(application_name="render") / "output.png"
    else:
        output_path = Path(args.output)

    try:
        render_scene(Path(args.scene), output_path, draw_bounds=args.draw_bounds)
    except (FileNotFoundError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Render completed. Output: {output_path}")


if __name__ == "__main__":
    main()
