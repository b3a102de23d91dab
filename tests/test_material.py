import pytest

from boardtrace.hittable import HitRecord
from boardtrace.light import LightSpace
from boardtrace.material import Lambertian, Material, Metal
from boardtrace.ray import Ray
from boardtrace.texture import CheckerTexture, SolidColor
from boardtrace.vec3 import Color, Vec3

ALBEDO = Color(0.2, 0.4, 0.6)


def _ray():
    return Ray(Vec3(0.0, 2.0, 0.0), Vec3(0.0, -1.0, 0.0))


def _light(ambient=Color(1.0, 1.0, 1.0)):
    return LightSpace(Vec3(0.0, -1.0, 0.0), ambient)


def _record(normal=Vec3(0.0, 1.0, 0.0), u=0.0, v=0.0):
    return HitRecord(point=Vec3(), normal=normal, u=u, v=v)


def test_lambertian_shadow_is_black():
    material = Lambertian(SolidColor(ALBEDO))
    assert material.scatter(_ray(), _record(), _light(), True) == Color()


def test_lambertian_facing_light_gives_albedo():
    material = Lambertian(SolidColor(ALBEDO))
    result = material.scatter(_ray(), _record(), _light(), False)
    assert list(result) == pytest.approx(list(ALBEDO))


def test_lambertian_facing_away_is_black():
    material = Lambertian(SolidColor(ALBEDO))
    result = material.scatter(_ray(), _record(Vec3(0.0, -1.0, 0.0)), _light(), False)
    assert list(result) == pytest.approx([0.0, 0.0, 0.0])


def test_lambertian_normalises_normal():
    material = Lambertian(SolidColor(ALBEDO))
    unit = material.scatter(_ray(), _record(Vec3(0.0, 1.0, 0.0)), _light(), False)
    long = material.scatter(_ray(), _record(Vec3(0.0, 5.0, 0.0)), _light(), False)
    assert list(long) == pytest.approx(list(unit))
    assert list(long) == pytest.approx(list(ALBEDO))


def test_lambertian_ambient_masks_channels():
    material = Lambertian(SolidColor(ALBEDO))
    result = material.scatter(_ray(), _record(), _light(Color(1.0, 0.0, 1.0)), False)
    assert result.y == 0.0
    assert result.x == pytest.approx(ALBEDO.x)
    assert result.z == pytest.approx(ALBEDO.z)


def test_lambertian_oblique_is_dimmer():
    material = Lambertian(SolidColor(ALBEDO))
    straight = material.scatter(_ray(), _record(), _light(), False)
    oblique = material.scatter(_ray(), _record(Vec3(1.0, 1.0, 0.0)), _light(), False)
    assert 0.0 < oblique.x < straight.x


def test_lambertian_uses_texture_coordinates():
    even, odd = Color(0.0, 1.0, 1.0), Color(0.0, 1.0, 0.0)
    material = Lambertian(CheckerTexture(SolidColor(even), SolidColor(odd), 2))
    first = material.scatter(_ray(), _record(u=0.1, v=0.1), _light(), False)
    second = material.scatter(_ray(), _record(u=0.1, v=0.9), _light(), False)
    assert list(first) == pytest.approx(list(even))
    assert list(second) == pytest.approx(list(odd))


def test_metal_yields_black():
    material = Metal(ALBEDO)
    assert material.albedo == ALBEDO
    assert material.scatter(_ray(), _record(), _light(), False) == Color()
    assert material.scatter(_ray(), _record(), _light(), True) == Color()


def test_material_is_abstract():
    with pytest.raises(TypeError):
        Material()