"""Tests for the command-line interface."""

import json
from threebody_sim.cli.main import main


def test_list_presets(capsys):
    assert main(["--list-presets"]) == 0
    
    out = capsys.readouterr().out
    assert "three_stars" in out
    assert "custom" in out


def test_headless_run(capsys):
    status = main(["--steps", "20", "--debug-every", "10"])
    
    out = capsys.readouterr().out
    assert status == 0
    assert "Running simulation: three_stars with 3 bodies" in out
    assert "Simulation complete!" in out
    # header row plus steps 0, 10 and 20
    assert len([line for line in out.splitlines() if line.startswith(("0 ", "10 ", "20 "))]) == 3


def test_flags_override_config(tmp_path, capsys):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"steps": 5, "G": 1.0}))
    
    status = main(["--config", str(path), "-G", "2.5", "--masses", "3", "30", "3", "--debug-every", "0"])
    
    out = capsys.readouterr().out
    assert status == 0
    assert "G: 2.5" in out
    assert "masses: [3.0, 30.0, 3.0]" in out


def test_singularity_exit_status(tmp_path, capsys):
    path = tmp_path / "crash.json"
    path.write_text(json.dumps({
        "preset": "custom",
        "bodies": [
            {"position": [0.0, 0.0], "momentum": [0.0, 0.0], "mass": 1.0},
            {"position": [0.0, 0.0], "momentum": [0.0, 0.0], "mass": 1.0},
            {"position": [50.0, 0.0], "momentum": [0.0, 0.0], "mass": 1.0},
        ],
    }))
    
    status = main(["--config", str(path), "--steps", "10"])
    
    out = capsys.readouterr().out
    assert status == 1
    assert "Simulation stopped at step 0" in out
    assert "singular" in out


def test_invalid_configuration(capsys):
    status = main(["--masses", "1", "2"])
    
    assert status == 2
    assert "Invalid configuration" in capsys.readouterr().out


def test_zero_render_interval_is_invalid(capsys):
    status = main(["--render", "--render-every", "0", "--steps", "5"])
    
    assert status == 2
    assert "render_every" in capsys.readouterr().out


def test_preset_size_must_match_body_count(tmp_path, capsys):
    path = tmp_path / "pair.json"
    path.write_text(json.dumps({
        "preset": "custom",
        "bodies": [
            {"position": [-100.0, 0.0], "momentum": [0.0, 0.0], "mass": 1.0},
            {"position": [100.0, 0.0], "momentum": [0.0, 0.0], "mass": 1.0},
        ],
    }))
    
    status = main(["--config", str(path), "--steps", "5"])
    
    out = capsys.readouterr().out
    assert status == 2
    assert "Expected exactly 3 bodies, got 2" in out
    assert "Simulation complete!" not in out
