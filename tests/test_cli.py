from monotri.cli import main
from monotri.orientation import polygon_is_clockwise
from monotri.polyio import read_poly, read_tri
from monotri.validate import validate


def test_generate_then_check(tmp_path, capsys):
    path = tmp_path / "star.poly"
    assert main(["generate", "star", "20", "-o", str(path)]) == 0
    assert len(read_poly(path)) == 20

    assert main(["check", str(path)]) == 0
    out = capsys.readouterr().out
    assert "n=20, triangles=18" in out
    assert out.rstrip().endswith("PASS")


def test_generate_clockwise(tmp_path):
    path = tmp_path / "random.poly"
    assert main(["generate", "random", "30", "--seed", "1", "--clockwise", "-o", str(path)]) == 0
    assert polygon_is_clockwise(read_poly(path))


def test_generate_to_stdout(capsys):
    assert main(["generate", "lshape", "--rotate", "0"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[:3] == ["6", "0 0", "2 0"]


def test_triangulate(tmp_path):
    src = tmp_path / "comb.poly"
    dst = tmp_path / "comb.tri"
    assert main(["generate", "comb", "3", "-o", str(src)]) == 0
    assert main(["triangulate", str(src), "-o", str(dst), "--axis", "1"]) == 0
    pts, tris = read_tri(dst)
    assert len(pts) == 13
    assert len(tris) == 11
    ok, msg = validate(pts, [i for t in tris for i in t])
    assert ok, msg


def test_check_along_y(tmp_path, capsys):
    src = tmp_path / "random.poly"
    assert main(["generate", "random", "40", "-o", str(src)]) == 0
    assert main(["check", str(src), "--axis", "1"]) == 0
    assert capsys.readouterr().out.rstrip().endswith("PASS")


def test_triangulate_to_stdout(tmp_path, capsys):
    src = tmp_path / "square.poly"
    src.write_text("4\n1 1\n-1 1\n-1 -1\n1 -1\n", encoding="utf-8")
    assert main(["triangulate", str(src)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-3:] == ["2", "3 1 2", "0 1 3"]


def test_degenerate_input_fails(tmp_path):
    src = tmp_path / "line.poly"
    src.write_text("2\n0 0\n1 1\n", encoding="utf-8")
    assert main(["triangulate", str(src)]) == 1


def test_malformed_input_fails(tmp_path):
    src = tmp_path / "bad.poly"
    src.write_text("4\n0 0\n", encoding="utf-8")
    assert main(["check", str(src)]) == 1


def test_missing_input_fails(tmp_path):
    assert main(["check", str(tmp_path / "missing.poly")]) == 1
