"""
test_main.py - command-line entry point
"""
import yaml

import main


def test_main_scores_text(capsys):
    assert main.main(["--text", "cry cry cry"]) == 0
    out = capsys.readouterr().out
    assert "emotion_primary: sad" in out
    assert "nightmare_index: 40" in out
    assert "sentiment: -1.000" in out


def test_main_text_requires_argument(capsys):
    assert main.main(["--text"]) == 2


def test_main_missing_config(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().out


def test_run_from_config(entries_file, tmp_path, write_config):
    out = tmp_path / "dreams.csv"
    path = write_config({
        "data": {"input_path": str(entries_file), "export_path": str(out)},
        "logging": {"level": "WARNING"},
    })

    shared = main.run(str(path))

    assert shared["results"]["export"]["exported"] is True
    assert out.exists()
    assert main.main([str(path)]) == 0
