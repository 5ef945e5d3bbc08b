import json

import pytest

import unitcircle.__main__ as cli


def _write_events(tmp_path, events):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(events), encoding="utf-8")
    return path


def test_main_replays_events_and_prints_readout(tmp_path, capsys):
    # 400x400 canvas: center (200, 200), radius 160
    events = [
        {"kind": "mousemove", "x": 300, "y": 100},
        {"kind": "mousedown", "x": 300, "y": 100},
        {"kind": "mouseup", "x": 300, "y": 100},
    ]
    path = _write_events(tmp_path, events)

    cli.main([str(path), "--width", "400", "--height", "400"])

    out = capsys.readouterr().out
    assert "Events replayed: 3" in out
    assert "State: PinSelected" in out
    assert "  coordinates: (√2/2, √2/2)" in out
    assert "  csc:" not in out
    assert "  #1 45.0° (π/4) [selected]" in out


def test_main_extra_trig_and_no_snap(tmp_path, capsys):
    events = [
        {"kind": "touchstart", "x": 300, "y": 150},
        {"kind": "touchend", "x": 300, "y": 150},
    ]
    path = _write_events(tmp_path, events)

    cli.main([str(path), "--width", "400", "--height", "400", "--no-snap", "--extra-trig"])

    out = capsys.readouterr().out
    assert "  csc:" in out
    assert "  coordinates: (0.89, 0.45)" in out
    assert "  #1 26.6° (0.46) [selected]" in out


def test_main_without_events_prints_placeholders(tmp_path, capsys):
    path = _write_events(tmp_path, [])

    cli.main([str(path)])

    out = capsys.readouterr().out
    assert "State: Idle" in out
    assert out.count("  (none)") == 2


def test_main_writes_tikz_document(tmp_path, monkeypatch):
    path = _write_events(tmp_path, [{"kind": "mousemove", "x": 500, "y": 300}])
    tikz_path = tmp_path / "out" / "diagram.tex"
    rendered = []

    def _generate_document(controller, **kwargs):
        rendered.append((controller.state, kwargs))
        return "tikz document"

    monkeypatch.setattr(cli, "generate_tikz_document", _generate_document)

    cli.main([str(path), "--tikz-output-path", str(tikz_path)])

    assert tikz_path.read_text(encoding="utf-8") == "tikz document"
    assert rendered == [("Hovering", {})]


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        json.dumps({"kind": "mousemove"}),
        json.dumps([{"x": 1, "y": 2}]),
        json.dumps([{"kind": "doubletap", "x": 1, "y": 2}]),
        json.dumps([{"kind": "mousemove", "x": "left", "y": 2}]),
    ],
)
def test_main_rejects_malformed_scripts(tmp_path, payload):
    path = tmp_path / "events.json"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(path)])
    assert excinfo.value.code == 1


def test_main_rejects_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        cli.main([str(tmp_path / "missing.json")])
