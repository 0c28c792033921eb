import pytest

from minirt.elements import parse_ambient, parse_camera, parse_light
from minirt.errors import (
    ERR_AMBIENT_COUNT,
    ERR_CAMERA_ANGLE,
    ERR_CAMERA_COUNT,
    ERR_COLOR,
    ERR_LIGHT_COUNT,
    ERR_LIGHT_RATIO,
    ERR_MISSING,
    ERR_ORIENTATION,
    ERR_TOO_LONG,
    SceneError,
)
from minirt.scene import Scene
from minirt.vec3 import Vec3


def test_ambient_parsed():
    scene = Scene()
    ambient = parse_ambient(scene, "A 0.2 255,255,255\n", 1)
    assert ambient.ratio == pytest.approx(0.2)
    assert ambient.color == Vec3(1.0, 1.0, 1.0)
    assert scene.ambient is ambient
    assert scene.ambient_count == 1


def test_ambient_twice_rejected():
    scene = Scene()
    parse_ambient(scene, "A 0.2 255,255,255", 1)
    with pytest.raises(SceneError) as excinfo:
        parse_ambient(scene, "A 0.2 255,255,255", 1)
    assert excinfo.value.message == ERR_AMBIENT_COUNT


def test_ambient_bad_ratio():
    with pytest.raises(SceneError) as excinfo:
        parse_ambient(Scene(), "A 1.5 255,255,255", 1)
    assert excinfo.value.message == ERR_LIGHT_RATIO


def test_ambient_bad_color():
    with pytest.raises(SceneError) as excinfo:
        parse_ambient(Scene(), "A 0.5 256,0,0", 1)
    assert excinfo.value.message == ERR_COLOR


def test_ambient_trailing_data():
    with pytest.raises(SceneError) as excinfo:
        parse_ambient(Scene(), "A 0.5 1,2,3 extra", 1)
    assert excinfo.value.message == ERR_TOO_LONG


def test_camera_parsed():
    scene = Scene()
    camera = parse_camera(scene, "C -50,0,20 0,0,1 70", 1)
    assert camera.origin == Vec3(-50.0, 0.0, 20.0)
    assert camera.direction == Vec3(0.0, 0.0, 1.0)
    assert camera.fov == 70.0
    assert camera.win_size == (1920.0, 1080.0)
    assert scene.camera is camera


def test_camera_direction_normalized():
    camera = parse_camera(Scene(), "C 0,0,0 0,0.5,0.5 90", 1)
    assert camera.direction.length() == pytest.approx(1.0)
    assert camera.direction.y == pytest.approx(camera.direction.z)


def test_camera_zero_direction():
    with pytest.raises(SceneError) as excinfo:
        parse_camera(Scene(), "C 0,0,0 0,0,0 70", 1)
    assert excinfo.value.message == ERR_ORIENTATION


def test_camera_direction_out_of_range():
    with pytest.raises(SceneError) as excinfo:
        parse_camera(Scene(), "C 0,0,0 2,0,0 70", 1)
    assert excinfo.value.message == ERR_ORIENTATION


def test_camera_bad_fov():
    with pytest.raises(SceneError) as excinfo:
        parse_camera(Scene(), "C 0,0,0 0,0,1 190", 1)
    assert excinfo.value.message == ERR_CAMERA_ANGLE


def test_camera_twice_rejected():
    scene = Scene()
    parse_camera(scene, "C 0,0,0 0,0,1 70", 1)
    with pytest.raises(SceneError) as excinfo:
        parse_camera(scene, "C 0,0,0 0,0,1 70", 1)
    assert excinfo.value.message == ERR_CAMERA_COUNT


def test_light_parsed():
    scene = Scene()
    light = parse_light(scene, "L -40,50,0 0.6 10,0,255", 1)
    assert light.origin == Vec3(-40.0, 50.0, 0.0)
    assert light.brightness == pytest.approx(0.6)
    assert light.color * 255.0 == pytest.approx(Vec3(10.0, 0.0, 255.0)) or (
        (light.color * 255.0).x == pytest.approx(10.0)
        and (light.color * 255.0).z == pytest.approx(255.0)
    )
    assert scene.lights == [light]


def test_light_default_color():
    scene = Scene()
    light = parse_light(scene, "L 0,0,0 0.5\n", 1)
    assert light.color == Vec3(255.0, 255.0, 255.0)


def test_light_twice_rejected():
    scene = Scene()
    parse_light(scene, "L 0,0,0 0.5", 1)
    with pytest.raises(SceneError) as excinfo:
        parse_light(scene, "L 0,0,0 0.5", 1)
    assert excinfo.value.message == ERR_LIGHT_COUNT
    assert len(scene.lights) == 1


def test_light_missing_component():
    with pytest.raises(SceneError) as excinfo:
        parse_light(Scene(), "L 0,0 0.5", 1)
    assert excinfo.value.message == ERR_MISSING


def test_light_bad_color_start():
    with pytest.raises(SceneError) as excinfo:
        parse_light(Scene(), "L 0,0,0 0.5 x", 1)
    assert excinfo.value.message == ERR_MISSING


def test_light_bad_ratio():
    with pytest.raises(SceneError) as excinfo:
        parse_light(Scene(), "L 0,0,0 -0.5", 1)
    assert excinfo.value.message == ERR_LIGHT_RATIO