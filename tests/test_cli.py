"""Tests for the command-line interface."""

from pathlib import Path

from typer.testing import CliRunner

from mdpage.cli import app

from conftest import FOOTER, HEADER

cli = CliRunner()


def test_default_command_builds_page(site_dir: Path, monkeypatch) -> None:
    monkeypatch.chdir(site_dir)

    result = cli.invoke(app, [])

    assert result.exit_code == 0, result.output
    full = (site_dir / "full.html").read_text(encoding="utf-8")
    assert full.startswith(HEADER)
    assert full.endswith(FOOTER)


def test_page_command_accepts_path_overrides(site_dir: Path, monkeypatch, tmp_path_factory) -> None:
    out_dir = tmp_path_factory.mktemp("out")
    monkeypatch.chdir(site_dir)

    result = cli.invoke(
        app,
        ["page", "--body", str(out_dir / "body.html"), "--output", str(out_dir / "index.html")],
    )

    assert result.exit_code == 0, result.output
    assert (out_dir / "body.html").exists()
    assert (out_dir / "index.html").exists()
    assert not (site_dir / "full.html").exists()


def test_missing_content_exits_nonzero(site_dir: Path, monkeypatch) -> None:
    (site_dir / "readme.md").unlink()
    monkeypatch.chdir(site_dir)

    result = cli.invoke(app, ["page"])

    assert result.exit_code == 1
    assert "Missing content file" in result.output
    assert not (site_dir / "full.html").exists()


def test_body_command_only_renders(site_dir: Path, monkeypatch) -> None:
    monkeypatch.chdir(site_dir)

    result = cli.invoke(app, ["body"])

    assert result.exit_code == 0, result.output
    assert (site_dir / "post.html").exists()
    assert not (site_dir / "full.html").exists()


def test_css_command_writes_stylesheet(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = cli.invoke(app, ["css", "--theme", "monokai"])

    assert result.exit_code == 0, result.output
    assert ".codehilite" in (tmp_path / "codehilite.css").read_text(encoding="utf-8")


def test_css_command_unknown_theme_exits_nonzero(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = cli.invoke(app, ["css", "--theme", "no-such-theme"])

    assert result.exit_code == 1
    assert not (tmp_path / "codehilite.css").exists()


def test_config_file_in_working_directory_is_used(site_dir: Path, monkeypatch) -> None:
    (site_dir / "article.md").write_text("# Other\n", encoding="utf-8")
    (site_dir / "mdpage.yaml").write_text(
        "source:\n  content: article.md\noutput:\n  page: out.html\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(site_dir)

    result = cli.invoke(app, [])

    assert result.exit_code == 0, result.output
    assert '<h1 id="other">Other</h1>' in (site_dir / "out.html").read_text(encoding="utf-8")


def test_invalid_config_exits_nonzero(site_dir: Path, monkeypatch) -> None:
    (site_dir / "mdpage.yaml").write_text("style:\n  colour: red\n", encoding="utf-8")
    monkeypatch.chdir(site_dir)

    result = cli.invoke(app, [])

    assert result.exit_code == 1


def test_themes_command_lists_default(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = cli.invoke(app, ["themes"])

    assert result.exit_code == 0
    assert "default" in result.output.splitlines()


def test_invalid_utf8_content_reports_build_failure(site_dir: Path, monkeypatch) -> None:
    (site_dir / "readme.md").write_bytes(b"# hi \xff\xfe\n")
    monkeypatch.chdir(site_dir)

    result = cli.invoke(app, [])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "Build failed" in result.output
    assert not (site_dir / "full.html").exists()


def test_non_string_log_level_in_config_exits_cleanly(site_dir: Path, monkeypatch) -> None:
    (site_dir / "mdpage.yaml").write_text("logging:\n  level: 10\n", encoding="utf-8")
    monkeypatch.chdir(site_dir)

    result = cli.invoke(app, [])

    assert result.exit_code == 1
    assert not isinstance(result.exception, AttributeError)
    assert "Invalid config" in result.output
    assert not (site_dir / "full.html").exists()


def test_unknown_extension_in_config_exits_nonzero(site_dir: Path, monkeypatch) -> None:
    (site_dir / "mdpage.yaml").write_text(
        "render:\n  extensions:\n    - no_such_ext\n", encoding="utf-8"
    )
    monkeypatch.chdir(site_dir)

    result = cli.invoke(app, [])

    assert result.exit_code == 1
    assert "Build failed" in result.output
    assert not (site_dir / "post.html").exists()
    assert not (site_dir / "full.html").exists()
