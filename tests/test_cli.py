import cv2
import pytest

from countdice_lib import cli


@pytest.fixture
def no_window(monkeypatch):
    shown = []
    monkeypatch.setattr(cli, "show_result", lambda img, **kwargs: shown.append(kwargs))
    return shown


@pytest.mark.parametrize("argv", [[], ["in.png"], ["a.png", "b.png", "c.png"]])
def test_wrong_argument_count(capsys, argv):
    assert cli.main(argv) == -1
    assert "Usage: countdice ImageToProcessPath OutputImagePath" in capsys.readouterr().out


def test_unknown_option_is_a_usage_error(capsys):
    assert cli.main(["a.png", "b.png", "--bogus"]) == -1
    assert "Usage:" in capsys.readouterr().out


def test_unreadable_input_stops_before_processing(monkeypatch, tmp_path, capsys):
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"garbage")
    output = tmp_path / "out.png"

    def fail(*args, **kwargs):
        raise AssertionError("pipeline must not run")

    monkeypatch.setattr(cli, "count_dice", fail)
    monkeypatch.setattr(cli, "save_image", fail)
    monkeypatch.setattr(cli, "show_result", fail)

    assert cli.main([str(broken), str(output)]) == -1
    assert cli.main([str(tmp_path / "missing.png"), str(output)]) == -1
    assert not output.exists()
    assert "Could not open the image" in capsys.readouterr().out


def test_success_writes_and_displays(tmp_path, capsys, no_window, three_pip_die_file):
    output = tmp_path / "labeled.png"

    assert cli.main([str(three_pip_die_file), str(output)]) == 0

    assert "Sum 3" in capsys.readouterr().out
    assert cv2.imread(str(output)) is not None
    assert no_window == [{"window_name": "Labeled Image", "max_width": 1920, "max_height": 1080}]


def test_no_display_flag(tmp_path, no_window, three_pip_die_file):
    output = tmp_path / "labeled.jpg"

    assert cli.main([str(three_pip_die_file), str(output), "--no-display"]) == 0
    assert output.exists()
    assert no_window == []


def test_unwritable_output(tmp_path, capsys, no_window, three_pip_die_file):
    output = tmp_path / "labeled.notaformat"

    assert cli.main([str(three_pip_die_file), str(output)]) == -1
    assert "Could not save the image" in capsys.readouterr().out
    assert no_window == []


def test_bad_config(tmp_path, capsys, three_pip_die_file):
    assert cli.main([
        str(three_pip_die_file), str(tmp_path / "o.png"),
        "--config", str(tmp_path / "missing.json"),
    ]) == -1
    assert "Could not load config" in capsys.readouterr().out


def test_option_between_paths(tmp_path, no_window, three_pip_die_file):
    output = tmp_path / "labeled.png"

    assert cli.main([str(three_pip_die_file), "--no-display", str(output)]) == 0
    assert output.exists()
    assert no_window == []


@pytest.mark.parametrize("argv", [["-h"], ["--help"], ["in.png", "out.png", "-h"]])
def test_help_is_not_a_run(capsys, argv):
    assert cli.main(argv) == -1
    out = capsys.readouterr().out
    assert "--no-display" in out
    assert "Usage: countdice ImageToProcessPath OutputImagePath" in out


def test_dash_prefixed_paths_after_separator(monkeypatch, tmp_path, no_window, three_pip_die_file):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "-dice.png").write_bytes(three_pip_die_file.read_bytes())

    assert cli.main(["--no-display", "--", "-dice.png", "-out.png"]) == 0
    assert (tmp_path / "-out.png").exists()


def test_missing_output_directory(tmp_path, capsys, no_window, three_pip_die_file):
    output = tmp_path / "missing" / "labeled.png"

    assert cli.main([str(three_pip_die_file), str(output)]) == -1
    assert "Could not save the image" in capsys.readouterr().out
    assert no_window == []
