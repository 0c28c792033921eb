import pytest

from minirt.errors import (
    ERR_COLOR,
    ERR_DIAMETER,
    ERR_MISSING,
    ERR_NOT_NUMERIC,
    ERR_ORIENTATION,
    ERR_TOO_LONG,
    SceneError,
)
from minirt.scene import ObjectType, Scene
from minirt.shape_parsing import parse_cylinder, parse_plane, parse_sphere
from minirt.vec3 import Vec3


def _error(func, line, pos=2):
    with pytest.raises(SceneError) as excinfo:
        func(Scene(), line, pos)
    return excinfo.value.message


def test_sphere_is_parsed_and_added():
    scene = Scene()
    obj = parse_sphere(scene, "sp 1,2,3 4 255,0,0\n", 2)
    assert scene.objects == [obj]
    assert obj.type is ObjectType.SPHERE
    assert obj.data.origin == Vec3(1, 2, 3)
    assert obj.data.radius * 2 == 4.0
    assert obj.data.color * 255 == Vec3(255, 0, 0)


def test_sphere_squared_radius_matches_radius():
    obj = parse_sphere(Scene(), "sp 0,0,0 3.5 0,0,0", 2)
    assert obj.data.squared_radius == pytest.approx(obj.data.radius ** 2)


@pytest.mark.parametrize("diameter", ["0", "-2"])
def test_sphere_rejects_non_positive_diameter(diameter):
    assert _error(parse_sphere, f"sp 0,0,0 {diameter} 0,0,0\n") == ERR_DIAMETER


def test_sphere_rejects_color_out_of_range():
    assert _error(parse_sphere, "sp 0,0,0 1 256,0,0\n") == ERR_COLOR


def test_sphere_missing_component():
    assert _error(parse_sphere, "sp 1,2\n") == ERR_MISSING


def test_sphere_junk_after_number():
    assert _error(parse_sphere, "sp 1,2,3 4x 255,0,0\n") == ERR_MISSING


def test_sphere_double_dot():
    assert _error(parse_sphere, "sp 1..2,0,0 1 0,0,0\n") == ERR_NOT_NUMERIC


def test_sphere_too_long():
    assert _error(parse_sphere, "sp 0,0,0 1 0,0,0 extra\n") == ERR_TOO_LONG


def test_plane_is_parsed_with_normalized_normal():
    scene = Scene()
    obj = parse_plane(scene, "pl 0,-1,0 0,0.5,0 0,255,0\n", 2)
    assert obj.type is ObjectType.PLANE
    assert obj.data.origin == Vec3(0, -1, 0)
    assert obj.data.normal.length() == pytest.approx(1.0)
    assert obj.data.normal.cross(Vec3(0, 0.5, 0)).length() == pytest.approx(0.0)
    assert obj.data.color * 255 == Vec3(0, 255, 0)
    assert scene.objects[-1] is obj


@pytest.mark.parametrize("normal", ["0,2,0", "0,0,0", "-1.5,0,0"])
def test_plane_rejects_bad_normal(normal):
    assert _error(parse_plane, f"pl 0,0,0 {normal} 0,0,0\n") == ERR_ORIENTATION


def test_plane_missing_color():
    assert _error(parse_plane, "pl 0,0,0 0,1,0\n") == ERR_MISSING


def test_cylinder_is_parsed():
    scene = Scene()
    obj = parse_cylinder(scene, "cy 1,1,1 0,0,1 2 5 255,255,0\n", 2)
    cyl = obj.data
    assert obj.type is ObjectType.CYLINDER
    assert cyl.pos == Vec3(1, 1, 1)
    assert cyl.orientation == Vec3(0, 0, 1)
    assert cyl.diameter == 2.0
    assert cyl.height == 5.0
    assert cyl.radius * 2 == cyl.diameter
    assert cyl.color * 255 == Vec3(255, 255, 0)
    assert scene.objects == [obj]


def test_cylinder_rejects_zero_height():
    assert _error(parse_cylinder, "cy 0,0,0 0,1,0 2 0 0,0,0\n") == ERR_DIAMETER


def test_cylinder_rejects_negative_diameter():
    assert _error(parse_cylinder, "cy 0,0,0 0,1,0 -1 3 0,0,0\n") == ERR_DIAMETER


def test_cylinder_missing_height():
    assert _error(parse_cylinder, "cy 0,0,0 0,1,0 2 \n") == ERR_MISSING


def test_cylinder_bad_orientation():
    assert _error(parse_cylinder, "cy 0,0,0 0,0,0 2 3 0,0,0\n") == ERR_ORIENTATION


def test_cylinder_too_long():
    assert _error(parse_cylinder, "cy 0,0,0 0,1,0 2 3 0,0,0 9\n") == ERR_TOO_LONG