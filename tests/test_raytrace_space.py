import pytest

from boardtrace.material import Lambertian
from boardtrace.ray import Ray
from boardtrace.raytrace_space import RayTraceSpace
from boardtrace.shapes import Plane
from boardtrace.texture import SolidColor
from boardtrace.vec3 import Color, Vec3


@pytest.fixture
def space():
    scene = RayTraceSpace(640, 16.0, 9.0)
    scene.plane = Plane(-1.0, 1.0, -1.0, 1.0, 0.0, Lambertian(SolidColor(Color(1.0, 1.0, 1.0))))
    scene.world.add(scene.plane)
    scene.build_bvh()
    return scene


def test_screen_size():
    scene = RayTraceSpace(640, 16.0, 9.0)
    assert scene.width == 640
    assert scene.height == 360


def test_ray_color_without_bvh_raises():
    scene = RayTraceSpace(64, 1.0, 1.0)
    with pytest.raises(RuntimeError):
        scene.ray_color(Ray(Vec3(), Vec3(0.0, 1.0, 0.0)), 1)


def test_ray_hit_record_without_bvh_raises():
    scene = RayTraceSpace(64, 1.0, 1.0)
    with pytest.raises(RuntimeError):
        scene.ray_hit_record(Ray(Vec3(), Vec3(0.0, 1.0, 0.0)))


def test_depth_zero_is_black(space):
    assert space.ray_color(Ray(Vec3(0.0, 1.0, 0.0), Vec3(0.0, -1.0, 0.0)), 0) == Color()


def test_upward_miss_gives_lower_background(space):
    color = space.ray_color(Ray(Vec3(0.0, 1.0, 0.0), Vec3(0.0, 1.0, 0.0)), 1)
    assert color == Color(0.5, 0.7, 1.0)


def test_horizontal_miss_blends_background(space):
    color = space.ray_color(Ray(Vec3(0.0, 1.0, 0.0), Vec3(1.0, 0.0, 0.0)), 1)
    expected = 0.5 * space.upper_corner_color + 0.5 * space.under_corner_color
    for got, want in zip(color, expected):
        assert got == pytest.approx(want)


def test_lit_plane_shows_full_colour(space):
    color = space.ray_color(Ray(Vec3(0.0, 1.0, 0.0), Vec3(0.0, -1.0, 0.0)), 1)
    for got, want in zip(color, Color(1.0, 1.0, 1.0)):
        assert got == pytest.approx(want)


def test_hit_record_identifies_plane(space):
    record = space.ray_hit_record(Ray(Vec3(0.0, 1.0, 0.0), Vec3(0.0, -1.0, 0.0)))
    assert record is not None
    assert record.object_handle == space.plane.handle
    assert record.t == pytest.approx(1.0)


def test_hit_record_none_on_miss(space):
    assert space.ray_hit_record(Ray(Vec3(0.0, 1.0, 0.0), Vec3(0.0, 1.0, 0.0))) is None