from obj_triangulate.mesh_component import Metrics
from obj_triangulate.report import (
    thousands, byte_text, stopwatch, file_size, file_extend, report,
)


def test_thousands():
    assert thousands(0) == "0"
    assert thousands(999) == "999"
    assert thousands(1234567) == "1.234.567"


def test_byte_text():
    assert byte_text(512) == "512 bytes"
    assert byte_text(2048) == "2KB"
    assert byte_text(3 * 1024 ** 2) == "3MB"
    assert byte_text(5 * 1024 ** 5) == "5120TB"


def test_stopwatch():
    assert stopwatch(0.0005) == "500 microseconds"
    assert stopwatch(0.25) == "250 milliseconds"
    assert stopwatch(3.2) == "3 seconds"
    assert stopwatch(3725) == "01:02:05"


def test_file_size_and_extend(tmp_path):
    small = tmp_path / "small.obj"
    big = tmp_path / "big.obj"
    small.write_bytes(b"x" * 100)
    big.write_bytes(b"x" * 2148)

    assert file_size(small) == "100 bytes"
    assert file_size(tmp_path / "missing.obj") == ""
    assert file_extend(small, big) == "+2KB"
    assert file_extend(big, small) == "-2KB"
    assert file_extend(small, small) == ""


def test_report_is_silent_for_empty_metrics(capsys):
    report(Metrics(), "a.obj", "b.obj", 1.0)
    assert capsys.readouterr().out == ""


def test_report(tmp_path, capsys):
    target = tmp_path / "lego.triangulated.obj"
    target.write_text("f 1 2 3\n")
    metrics = Metrics(vertices=1500, polygons_seen=2, polygons_expanded=2,
                      triangles_existing=10, triangles_created=4)

    report(metrics, tmp_path / "lego.obj", target, 0.002)

    out = capsys.readouterr().out
    assert "lego.triangulated.obj 8 bytes" in out
    assert "Polygons triangulated : 2" in out
    assert "Total triangles       : 14" in out
    assert "Total vertices        : 1.500" in out
    assert "Execution time        : 2 milliseconds" in out


def test_report_has_no_whitespace_only_lines(tmp_path, capsys):
    metrics = Metrics(vertices=4, polygons_seen=1, polygons_expanded=1,
                      triangles_created=2)

    report(metrics, tmp_path / "a.obj", tmp_path / "b.obj")

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == ""
    assert all(line == "" or line.strip() for line in lines)
