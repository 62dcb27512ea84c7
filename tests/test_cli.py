import pytest

from localekeys.cli import build_parser, main

from conftest import LOGIN


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_generates_files_with_defaults(tmp_path, write_json):
    langs = tmp_path / "assets" / "langs"
    write_json("en.json", LOGIN, directory=langs)

    assert main([]) == 0

    generated = tmp_path / "lib" / "generated"
    assert 'login_button_ok = "login.button.ok"' in (generated / "locale_keys.py").read_text(encoding="utf-8")
    assert "class AppMessages(Translations):" in (generated / "app_messages.py").read_text(encoding="utf-8")


def test_custom_paths_and_summary(tmp_path, write_json, langs_dir, capsys):
    write_json("en.json", LOGIN)
    exit_code = main([
        "-S", str(langs_dir), "-O", str(tmp_path / "gen"),
        "-o", "keys.py", "-m", "messages.py", "--summary",
    ])
    assert exit_code == 0
    assert (tmp_path / "gen" / "keys.py").exists()
    assert (tmp_path / "gen" / "messages.py").exists()
    assert "GENERATION SUMMARY" in capsys.readouterr().out


def test_single_source_file(tmp_path, write_json, langs_dir):
    write_json("en.json", {"en_only": "x"})
    write_json("fr.json", {"fr_only": "y"})
    assert main(["-S", str(langs_dir), "-s", "fr.json", "-O", str(tmp_path / "gen")]) == 0
    text = (tmp_path / "gen" / "locale_keys.py").read_text(encoding="utf-8")
    assert "fr_only" in text
    assert "en_only" not in text


def test_missing_source_dir_exits_with_error(tmp_path):
    assert main(["-S", str(tmp_path / "missing"), "-O", str(tmp_path / "gen")]) == 1
    assert not (tmp_path / "gen").exists()


def test_bad_config_file_exits_with_error(tmp_path):
    (tmp_path / "localekeys.yaml").write_text("nonsense_key: 1\n", encoding="utf-8")
    assert main([]) == 1


def test_parser_flags():
    args = build_parser().parse_args(["--strict", "--branch-values", "key", "--log-level", "warning"])
    assert args.strict is True
    assert args.branch_values == "key"
    assert args.log_level == "WARNING"
    assert build_parser().parse_args([]).strict is None
