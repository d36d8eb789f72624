import pytest

from propsync.manager import main

from conftest import BASE_FILENAME, write


def _run(args):
    with pytest.raises(SystemExit) as exc:
        main(args)
    return exc.value.code


def test_no_arguments_prints_usage(capsys):
    assert _run([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_unknown_command(capsys, locale_dir):
    assert _run(["frobnicate", str(locale_dir)]) == 1
    assert "Unknown command: frobnicate" in capsys.readouterr().out


def test_sync_command(capsys, locale_dir):
    assert _run(["sync", str(locale_dir)]) == 0

    out = capsys.readouterr().out
    assert "messages_fr.properties" in out
    assert "Updated" in out
    assert "welcome=Welcome" in (locale_dir / "messages_fr.properties").read_text(encoding="utf-8")


def test_check_command_fails_then_passes(locale_dir):
    assert _run(["check", str(locale_dir)]) == 1
    assert _run(["sync", str(locale_dir)]) == 0
    assert _run(["check", str(locale_dir)]) == 0


def test_custom_base_filename(tmp_path):
    write(tmp_path / "messages_de_DE.properties", ["a=A", "b=B"])
    write(tmp_path / "messages_fr.properties", ["a=AA"])

    assert _run(["sync", str(tmp_path), "messages_de_DE.properties"]) == 0
    assert "b=B" in (tmp_path / "messages_fr.properties").read_text(encoding="utf-8")
    assert (tmp_path / "messages_de_DE.properties").read_text(encoding="utf-8") == "a=A\nb=B\n"


def test_io_error_gives_failed_status(capsys, tmp_path):
    assert _run(["sync", str(tmp_path)]) == 1
    assert "sync failed" in capsys.readouterr().out


def test_clean_and_stats_commands(capsys, locale_dir):
    write(locale_dir / "messages_fr.properties", ["greeting=Salut", "greeting=Bonjour"])

    assert _run(["clean", str(locale_dir)]) == 0
    assert _run(["stats", str(locale_dir)]) == 0

    out = capsys.readouterr().out
    assert "Removed 1 duplicates" in out
    assert BASE_FILENAME in out


def test_log_file_from_environment(monkeypatch, locale_dir, tmp_path):
    log_file = tmp_path / "logs" / "propsync.log"
    monkeypatch.setenv("PROPSYNC_LOG_LEVEL", "INFO")
    monkeypatch.setenv("PROPSYNC_LOG_FILE", str(log_file))

    assert _run(["sync", str(locale_dir)]) == 0

    content = log_file.read_text(encoding="utf-8")
    assert "Updated messages_fr.properties" in content
    assert "propsync.processor" in content
