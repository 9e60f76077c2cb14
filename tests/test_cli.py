import pytest

from figgen.cli import main
from figgen.meshio import read_mesh


@pytest.mark.parametrize("argv,kind,count", [
    (["plane", "2", "2", "-d", "3"], "rectangle", 18),
    (["box", "2", "2", "2"], "box", 12),
    (["cone", "1", "2", "8", "4"], "cone", 64),
    (["cylinder", "1", "2", "4", "1"], "cylinder", 16),
    (["sphere", "1", "6", "6"], "sphere", 84),
])
def test_shapes(tmp_path, argv, kind, count):
    out = tmp_path / "out.3d"
    assert main(argv + [str(out)]) == 0

    data = read_mesh(out)
    assert data.kind == kind
    assert len(data.vertices) == 3 * count


def test_bezier(tmp_path):
    patch = tmp_path / "flat.patch"
    lines = ["1", ", ".join(str(i) for i in range(16)), "16"]
    lines += [f"{c}, 0, {r}" for r in range(4) for c in range(4)]
    patch.write_text("\n".join(lines) + "\n")

    out = tmp_path / "flat.3d"
    assert main(["bezier", str(patch), "2", str(out)]) == 0
    assert len(read_mesh(out).vertices) == 3 * 2 * 64


def test_invalid_geometry_exits_with_error(tmp_path):
    out = tmp_path / "out.3d"
    assert main(["plane", "2", "2", "-d", "0", str(out)]) == 1
    assert not out.exists()


def test_missing_patch_file(tmp_path):
    out = tmp_path / "out.3d"
    assert main(["bezier", str(tmp_path / "missing.patch"), "1", str(out)]) == 1
    assert not out.exists()


def test_log_file(tmp_path):
    log = tmp_path / "run.log"
    out = tmp_path / "s.3d"
    assert main(["--log-level", "DEBUG", "--log-file", str(log), "sphere", "1", "4", "4", str(out)]) == 0
    assert "sphere slices=4 stacks=4" in log.read_text()


def test_unknown_shape():
    with pytest.raises(SystemExit):
        main(["torus", "1", "out.3d"])


@pytest.mark.parametrize("argv", [
    ["sphere", "nan", "4", "4"],
    ["cylinder", "1", "inf", "4", "1"],
    ["plane", "nan", "2"],
])
def test_non_finite_dimensions_exit_with_error(tmp_path, argv):
    out = tmp_path / "out.3d"
    assert main(argv + [str(out)]) == 1
    assert not out.exists()
