import pytest

import polyclip.__main__ as cli

SCENE = """\
polygon A (0, 0) (10, 0) (10, 10) (0, 10)
polygon B (5, 5) (15, 5) (15, 15) (5, 15)
"""


@pytest.fixture
def scene_path(tmp_path):
    path = tmp_path / "scene.pc"
    path.write_text(SCENE, encoding="utf-8")
    return path


def test_main_runs_all_operations(scene_path, capsys):
    cli.main([str(scene_path)])

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "A: (0, 0) (10, 0) (10, 10) (0, 10)"
    assert "Area A: 100.0000" in out
    assert "Area B: 100.0000" in out
    assert "Intersection: (10, 5) (10, 10) (5, 10) (5, 5)" in out
    assert "Intersection area: 25.0000" in out
    assert "Merge area: 175.0000" in out


def test_main_single_operation(scene_path, capsys):
    cli.main([str(scene_path), "--op", "area"])

    out = capsys.readouterr().out
    assert "Area A: 100.0000" in out
    assert "Intersection" not in out
    assert "Merge" not in out


def test_main_reports_disjoint_intersection(tmp_path, capsys):
    path = tmp_path / "disjoint.pc"
    path.write_text(
        "polygon A (0,0) (1,0) (1,1) (0,1)\npolygon B (5,5) (6,5) (6,6) (5,6)\n",
        encoding="utf-8",
    )

    cli.main([str(path), "--op", "intersect"])

    assert "Intersection: (none)" in capsys.readouterr().out


def test_main_writes_tikz_document(scene_path, tmp_path, monkeypatch):
    tikz_path = tmp_path / "out" / "diagram.tex"
    rendered = []

    def _generate_document(layers, **kwargs):
        rendered.append([(layer.name, layer.role) for layer in layers])
        return "tikz document"

    monkeypatch.setattr(cli, "generate_tikz_document", _generate_document)

    cli.main([str(scene_path), "--tikz-output-path", str(tikz_path)])

    assert tikz_path.read_text(encoding="utf-8") == "tikz document"
    assert rendered == [
        [
            ("merge", "merge"),
            ("A", "first"),
            ("B", "second"),
            ("intersection", "intersection"),
        ]
    ]


def test_main_picks_named_polygons(tmp_path, capsys):
    path = tmp_path / "three.pc"
    path.write_text(SCENE + "polygon C (2, 2) (4, 2) (4, 4) (2, 4)\n", encoding="utf-8")

    cli.main([str(path), "--first", "A", "--second", "C", "--op", "intersect"])

    assert "Intersection: (2, 2) (4, 2) (4, 4) (2, 4)" in capsys.readouterr().out


def test_main_needs_two_polygons(tmp_path):
    path = tmp_path / "one.pc"
    path.write_text("polygon A (0,0) (1,0) (1,1)\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main([str(path)])
    assert exc.value.code == 1


def test_main_unknown_polygon_name(scene_path):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(scene_path), "--second", "Z"])
    assert exc.value.code == 1


def test_main_vertex_limit_failure(scene_path, caplog):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(scene_path), "--op", "intersect", "--max-vertices", "3"])

    assert exc.value.code == 1
    assert "Polygon operation failed" in caplog.text
