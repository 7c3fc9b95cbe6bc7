#!/usr/bin/env python3
"""
Tests for the android-i18n command line.
"""

import json

import pytest

from andi18n.cli import main


def test_import_command(sample_xls, project_dir, capsys):
    main(["import", "--source", str(sample_xls), "--default-locale", "en", "--project-dir", str(project_dir)])

    result = json.loads(capsys.readouterr().out)
    assert result["status"] == "ok"
    assert len(result["files"]) == 2
    assert result["locales"]["en"] == {"strings": 4, "plurals": 1, "default": True}
    assert result["locales"]["fr"]["strings"] == 3
    assert (project_dir / "src" / "main" / "res" / "values-fr" / "strings.xml").exists()


def test_import_from_config_file(sample_xls, project_dir, tmp_path, capsys):
    config_file = tmp_path / "android-i18n.yml"
    config_file.write_text(f"source_file: {sample_xls.name}\nproject_dir: {project_dir.name}\n")

    main(["import", "--config", str(config_file)])
    result = json.loads(capsys.readouterr().out)
    assert result["status"] == "ok"
    assert result["default_locale"] == "en"


def test_export_command(sample_xls, project_dir, tmp_path, capsys):
    main(["import", "--source", str(sample_xls), "--project-dir", str(project_dir)])
    capsys.readouterr()

    output = tmp_path / "export.xls"
    main(["export", "--output", str(output), "--project-dir", str(project_dir)])
    result = json.loads(capsys.readouterr().out)
    assert result["status"] == "ok"
    assert output.exists()


def test_export_without_output_fails(project_dir, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["export", "--project-dir", str(project_dir)])
    assert exc_info.value.code == 1
    assert json.loads(capsys.readouterr().out)["error_type"] == "MISSING_OUTPUT"


def test_import_error_is_reported_as_json(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["import", "--source", str(tmp_path / "missing.xls"), "--project-dir", str(tmp_path)])
    assert exc_info.value.code == 1

    err_lines = [line for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    error = json.loads(err_lines[-1])
    assert error["status"] == "error"
    assert error["error_type"] == "NotFoundError"


def test_no_command_prints_help():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
