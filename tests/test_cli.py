from minirt.cli import main
from minirt.errors import ERR_ARG, ERR_NAME, ERR_OPEN, ERR_WRONG_ID

SCENE = (
    "A 0.2 255,255,255\n"
    "C 0,0,-10 0,0,1 70\n"
    "L 0,5,-5 0.7 255,255,255\n"
    "sp 0,0,0 4 255,0,0\n"
)


def _write_scene(tmp_path, text=SCENE, name="scene.rt"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_renders_ppm(tmp_path):
    scene = _write_scene(tmp_path)
    out = tmp_path / "out.ppm"
    assert main([str(scene), "--size", "4x3", "-o", str(out)]) == 0
    data = out.read_bytes()
    header = b"P6\n4 3\n255\n"
    assert data.startswith(header)
    body = data[len(header):]
    assert len(body) == 4 * 3 * 3
    corner = tuple(body[0:3])
    assert corner == (0, 0, 0)
    center_index = (1 * 4 + 2) * 3
    red, green, blue = body[center_index:center_index + 3]
    assert red > green
    assert green == blue


def test_default_output_path(tmp_path):
    scene = _write_scene(tmp_path)
    assert main([str(scene), "--size", "2x2"]) == 0
    assert (tmp_path / "scene.ppm").read_bytes().startswith(b"P6\n2 2\n255\n")


def test_wrong_argument_count(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == ERR_ARG
    assert main(["a.rt", "b.rt"]) == 1
    assert capsys.readouterr().err == ERR_ARG


def test_bad_size(tmp_path, capsys):
    scene = _write_scene(tmp_path)
    assert main([str(scene), "--size", "0x3"]) == 1
    assert capsys.readouterr().err == ERR_ARG


def test_bad_extension(tmp_path, capsys):
    scene = _write_scene(tmp_path, name="scene.txt")
    assert main([str(scene)]) == 1
    assert capsys.readouterr().err == ERR_NAME


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.rt")]) == 1
    assert capsys.readouterr().err == ERR_OPEN


def test_invalid_scene_reports_error(tmp_path, capsys):
    scene = _write_scene(tmp_path, text="X 1 2 3\n")
    assert main([str(scene)]) == 1
    assert capsys.readouterr().err == ERR_WRONG_ID
    assert not (tmp_path / "scene.ppm").exists()