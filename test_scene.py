"""
Test Scene Rendering and Configuration
======================================

Frame sinks, SceneRenderer, YAML scene loading and the run_render entry
point (writes real PNG files into pytest's tmp_path).

Usage:
    pytest test_scene.py
"""

import cv2
import numpy as np
import pytest

from shape_raster import (
    Circle,
    Color,
    FrameSink,
    InvalidColorError,
    Point,
    Polygon,
    SceneConfig,
    SceneRenderer,
    ShapeConfig,
)
from run_render import render_scene

FILL = Color(0, 120, 255)
BORDER = Color(255, 255, 255)

SCENE_YAML = """
canvas_wh: [64, 48]
background: [10, 20, 30]
shapes:
  - shape_type: "polygon"
    vertices: [[4, 4], [30, 4], [30, 30], [4, 30]]
    fill_color: [0, 120, 255]
    border_color: [255, 255, 255]
    border_width: 1
  - shape_type: "circle"
    center: [45, 20]
    radius: 8
    fill_color: [255, 200, 0]
    border_color: [0, 0, 0]
    border_width: 2
"""


def square(vertices=((2, 2), (12, 2), (12, 12), (2, 12)), fill=FILL, canvas_wh=(16, 16)):
    return Polygon.from_vertices(
        vertices,
        fill_color=fill,
        border_color=BORDER,
        border_width=1,
        canvas_wh=canvas_wh,
    )


# ========== FrameSink ==========

def test_blank_frame_is_bgr():
    frame = FrameSink.blank_frame((4, 3), Color(1, 2, 3))

    assert frame.shape == (3, 4, 3)
    assert frame.dtype == np.uint8
    assert frame[0, 0].tolist() == [3, 2, 1]


def test_frame_sink_writes_bgr_pixels():
    frame = FrameSink.blank_frame((4, 3))
    sink = FrameSink(frame)
    sink.set_pixel(1, 2, (10, 20, 30))

    assert frame[2, 1].tolist() == [30, 20, 10]
    assert sink.size_wh == (4, 3)


def test_frame_sink_rejects_out_of_frame_pixels():
    sink = FrameSink(FrameSink.blank_frame((4, 3)))

    with pytest.raises(IndexError):
        sink.set_pixel(4, 0, (0, 0, 0))
    with pytest.raises(IndexError):
        sink.set_pixel(-1, 0, (0, 0, 0))


def test_frame_sink_validates_frame():
    with pytest.raises(ValueError):
        FrameSink(np.zeros((4, 4), dtype=np.uint8))
    with pytest.raises(ValueError):
        FrameSink(np.zeros((4, 4, 3), dtype=np.float32))
    with pytest.raises(TypeError):
        FrameSink([[0, 0, 0]])


# ========== SceneRenderer ==========

def test_renderer_draws_fill_border_and_background():
    renderer = SceneRenderer(background=Color(5, 5, 5))
    frame = renderer.render([square()], canvas_wh=(16, 16))

    assert frame[7, 7].tolist() == list(FILL.as_bgr())
    assert frame[2, 7].tolist() == list(BORDER.as_bgr())
    assert frame[15, 15].tolist() == [5, 5, 5]


def test_later_shapes_overwrite_earlier():
    red = Color(255, 0, 0)
    renderer = SceneRenderer()
    frame = renderer.render([square(), square(fill=red)], canvas_wh=(16, 16))

    assert frame[7, 7].tolist() == list(red.as_bgr())


def test_render_onto_returns_stats_per_shape():
    circle = Circle(
        fill_color=FILL,
        border_color=BORDER,
        border_width=1,
        canvas_wh=(16, 16),
        center=Point(8, 8),
        radius=3,
    )
    renderer = SceneRenderer()
    frame = renderer.new_frame((16, 16))
    stats = renderer.render_onto(frame, [square(), circle])

    assert len(stats) == 2
    assert stats[0].total_pixels == 121
    assert stats[1].total_pixels > 0


def test_render_rejects_shape_built_for_larger_canvas():
    renderer = SceneRenderer()
    large = square(vertices=((20, 20), (30, 20), (30, 30)), canvas_wh=(32, 32))

    with pytest.raises(ValueError):
        renderer.render([square(), large], canvas_wh=(16, 16))


def test_render_accepts_shape_built_for_smaller_canvas():
    frame = SceneRenderer().render([square(canvas_wh=(14, 14))], canvas_wh=(16, 16))

    assert frame[7, 7].tolist() == list(FILL.as_bgr())


def test_bounding_box_overlay_returns_copy():
    renderer = SceneRenderer()
    shapes = [square()]
    frame = renderer.render(shapes, canvas_wh=(16, 16))
    original = frame.copy()

    overlay = renderer.draw_bounding_boxes(frame, shapes)

    assert overlay.shape == frame.shape
    assert np.array_equal(frame, original)
    assert not np.array_equal(overlay, frame)


# ========== Configuration ==========

def test_scene_config_from_yaml(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text(SCENE_YAML)

    config = SceneConfig.from_yaml(path)

    assert config.canvas_wh == (64, 48)
    assert config.background_color() == Color(10, 20, 30)
    assert [s.shape_type for s in config.shapes] == ["polygon", "circle"]

    shapes = config.build_shapes()
    assert isinstance(shapes[0], Polygon)
    assert isinstance(shapes[1], Circle)
    assert shapes[1].center == Point(45, 20)
    assert shapes[0].canvas_wh == (64, 48)


def test_scene_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SceneConfig.from_yaml(tmp_path / "missing.yaml")


def test_scene_config_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("shapes: [unclosed")

    with pytest.raises(ValueError):
        SceneConfig.from_yaml(path)


def test_scene_config_rejects_bad_canvas():
    with pytest.raises(ValueError):
        SceneConfig(canvas_wh=(0, 10))


def test_shape_config_validation():
    with pytest.raises(ValueError):
        ShapeConfig(shape_type="hexagon", fill_color=(0, 0, 0), border_color=(0, 0, 0))
    with pytest.raises(ValueError):
        ShapeConfig(
            shape_type="polygon",
            fill_color=(0, 0, 0),
            border_color=(0, 0, 0),
            vertices=[(0, 0), (1, 1)],
        )
    with pytest.raises(ValueError):
        ShapeConfig(shape_type="circle", fill_color=(0, 0, 0), border_color=(0, 0, 0))
    with pytest.raises(ValueError):
        ShapeConfig.from_dict({"shape_type": "circle", "center": [1, 1], "radius": 2})


def test_shape_config_bad_color_fails_on_build():
    config = ShapeConfig(
        shape_type="circle",
        fill_color=(0, 0, 256),
        border_color=(0, 0, 0),
        center=(5, 5),
        radius=2,
    )
    with pytest.raises(InvalidColorError):
        config.build((16, 16))


def _write_scene(tmp_path, text):
    path = tmp_path / "scene.yaml"
    path.write_text(text)
    return path


@pytest.mark.parametrize("shape_yaml", [
    # Non-integer geometry
    "shape_type: circle\n    center: [5, 5]\n    radius: 2.5\n"
    "    fill_color: [0, 0, 0]\n    border_color: [0, 0, 0]",
    "shape_type: circle\n    center: [5.5, 5]\n    radius: 2\n"
    "    fill_color: [0, 0, 0]\n    border_color: [0, 0, 0]",
    "shape_type: circle\n    center: [5, 5]\n    radius: 2\n    border_width: 0.5\n"
    "    fill_color: [0, 0, 0]\n    border_color: [0, 0, 0]",
    # Malformed colors
    "shape_type: circle\n    center: [5, 5]\n    radius: 2\n"
    "    fill_color: 5\n    border_color: [0, 0, 0]",
    "shape_type: circle\n    center: [5, 5]\n    radius: 2\n"
    "    fill_color: [0, 0]\n    border_color: [0, 0, 0]",
    # Malformed vertices
    "shape_type: polygon\n    vertices: [[1], [5, 5], [1, 9]]\n"
    "    fill_color: [0, 0, 0]\n    border_color: [0, 0, 0]",
    "shape_type: polygon\n    vertices: [[1, 1, 1], [5, 5], [1, 9]]\n"
    "    fill_color: [0, 0, 0]\n    border_color: [0, 0, 0]",
    "shape_type: polygon\n    vertices: 12\n"
    "    fill_color: [0, 0, 0]\n    border_color: [0, 0, 0]",
])
def test_scene_config_rejects_malformed_shapes(tmp_path, shape_yaml):
    path = _write_scene(tmp_path, f"canvas_wh: [16, 16]\nshapes:\n  - {shape_yaml}\n")

    with pytest.raises(ValueError):
        SceneConfig.from_yaml(path)


@pytest.mark.parametrize("text", [
    "- shape_type: circle\n",
    "canvas_wh: [16.5, 16]\n",
    "canvas_wh: 16\n",
    "background: [0, 0]\n",
    "shapes: {shape_type: circle}\n",
    "shapes: [5]\n",
])
def test_scene_config_rejects_malformed_document(tmp_path, text):
    with pytest.raises(ValueError):
        SceneConfig.from_yaml(_write_scene(tmp_path, text))


def test_shape_config_normalizes_yaml_lists():
    config = ShapeConfig.from_dict({
        "shape_type": "polygon",
        "vertices": [[0, 0], [4, 0], [4, 4]],
        "fill_color": [1, 2, 3],
        "border_color": [4, 5, 6],
    })

    assert config.fill_color == (1, 2, 3)
    assert config.vertices == [(0, 0), (4, 0), (4, 4)]


# ========== run_render ==========

def test_render_scene_writes_png(tmp_path):
    scene_path = tmp_path / "scene.yaml"
    scene_path.write_text(SCENE_YAML)
    output_path = tmp_path / "out" / "scene.png"

    written = render_scene(scene_path, output_path, draw_bounds=True)

    assert written == output_path
    image = cv2.imread(str(output_path))
    assert image.shape == (48, 64, 3)
    # Polygon interior, BGR
    assert image[15, 15].tolist() == [255, 120, 0]
    # Background
    assert image[45, 2].tolist() == [30, 20, 10]
