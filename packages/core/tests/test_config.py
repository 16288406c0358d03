"""Tests for configuration loading."""

import pytest

from svnreview_core.config import load_config, load_template


def test_defaults_applied_when_no_config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("SVNREVIEW_SVN", raising=False)
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["svn_command"] == "svn"
    assert config["output_dir"] == "."
    assert config["template"] is None
    assert config["pdf"] is False


def test_config_file_overrides_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("SVNREVIEW_SVN", raising=False)
    cfg = tmp_path / ".svnreview.yml"
    cfg.write_text("svn_command: /opt/svn/bin/svn\noutput_dir: records\npdf: true\n")
    config = load_config(config_path=str(cfg))
    assert config["svn_command"] == "/opt/svn/bin/svn"
    assert config["output_dir"] == "records"
    assert config["pdf"] is True


def test_empty_config_file_uses_defaults(tmp_path):
    cfg = tmp_path / ".svnreview.yml"
    cfg.write_text("")
    config = load_config(config_path=str(cfg))
    assert config["output_dir"] == "."


def test_env_var_overrides_svn_command(tmp_path, monkeypatch):
    monkeypatch.setenv("SVNREVIEW_SVN", "/usr/local/bin/svn")
    cfg = tmp_path / ".svnreview.yml"
    cfg.write_text("svn_command: svn\n")
    config = load_config(config_path=str(cfg))
    assert config["svn_command"] == "/usr/local/bin/svn"


def test_cli_overrides_config_file(tmp_path):
    cfg = tmp_path / ".svnreview.yml"
    cfg.write_text("output_dir: records\n")
    config = load_config(config_path=str(cfg), cli_overrides={"output_dir": "elsewhere"})
    assert config["output_dir"] == "elsewhere"


def test_none_cli_overrides_ignored(tmp_path):
    cfg = tmp_path / ".svnreview.yml"
    cfg.write_text("pdf: true\n")
    config = load_config(config_path=str(cfg), cli_overrides={"pdf": None})
    assert config["pdf"] is True


def test_defaults_not_shared_between_loads(tmp_path):
    config_a = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_b = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_a["output_dir"] = "changed"
    assert config_b["output_dir"] == "."


def test_no_template_configured():
    assert load_template({"template": None}) is None


def test_custom_template_path(tmp_path):
    template_file = tmp_path / "record.txt.j2"
    template_file.write_text("{{ report_id }}")
    assert load_template({"template": str(template_file)}) == "{{ report_id }}"


def test_missing_custom_template_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_template({"template": str(tmp_path / "does-not-exist.j2")})
