import pytest

from brewlog import cli


@pytest.fixture()
def no_config(tmp_path):
    return ["-c", str(tmp_path / "missing.toml")]


def test_list(capsys, no_config):
    cli.main(no_config + ["list"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("  1.   ")
    assert lines[0].endswith("| B&W FSL28")
    assert lines[1].startswith("  2. * ")
    assert lines[2].endswith("| Folgers")


def test_list_favorites(capsys, no_config):
    cli.main(no_config + ["list", "--favorites"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("  2. * ")


def test_show(capsys, no_config):
    cli.main(no_config + ["show", "3"])
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "  Coffee: Folgers"
    assert out[5] == "  Output: 43.9 g"
    assert out[7] == "  Duration: 20.9 sec"


@pytest.mark.parametrize("index", ["0", "4"])
def test_show_out_of_range(no_config, index):
    with pytest.raises(SystemExit, match="Index out of range"):
        cli.main(no_config + ["show", index])


def test_date_format_from_config(capsys, tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[display]\ndate_format = "%Y"\n', encoding="utf-8")
    cli.main(["-c", str(path), "show", "1"])
    first = capsys.readouterr().out.splitlines()[0]
    assert first.startswith("  Date brewed: ")
    assert len(first) == len("  Date brewed: 2024")


def test_bad_config_exits(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[nope]\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="unknown section"):
        cli.main(["-c", str(path), "list"])


def test_no_subcommand_launches_tui(monkeypatch, no_config):
    launched = []
    monkeypatch.setattr("brewlog.tui.main", launched.append)
    cli.main(no_config)
    assert len(launched) == 1
    assert launched[0].phase.name == "listing"


def test_unreadable_config_exits(tmp_path):
    path = tmp_path / "config.toml"
    path.write_bytes(b"\xff")
    with pytest.raises(SystemExit):
        cli.main(["-c", str(path), "list"])
    with pytest.raises(SystemExit):
        cli.main(["-c", str(tmp_path), "list"])


def test_bad_log_file_exits(tmp_path, monkeypatch, no_config):
    monkeypatch.setattr("logging.root.handlers", [])
    with pytest.raises(SystemExit, match="cannot open log file"):
        cli.main(no_config + ["--log-file", str(tmp_path / "nope" / "x.log"), "list"])
