#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_cli_integration.py
"""Integration tests for the blockrender command line.

This module runs ``main`` end to end: reading documents from files and
stdin, writing to stdout and files, applying configuration files, and
mapping failures to exit codes.
"""

import io
import json

import pytest

from blockrender.cli import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR, create_parser, main
from blockrender.config import CONFIG_ENV_VAR

DOCUMENT = [
    {"id": "h", "type": "heading", "props": {"level": 2}, "content": "Hello"},
    {"id": "p", "type": "paragraph", "content": "World"},
    {"id": "c", "type": "codeBlock", "props": {"language": "python"}, "content": "print(1)"},
]


@pytest.fixture
def document_file(tmp_path):
    """Write the sample document to a temporary JSON file."""
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep configuration discovery inside the temporary directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.mark.integration
@pytest.mark.cli
class TestCLIRendering:
    """Successful command-line runs."""

    def test_render_to_stdout(self, document_file, capsys):
        """The fragment is written to stdout."""
        assert main([str(document_file), "--no-highlight"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert '<h2 id="h2-2"' in out
        assert "World" in out
        assert '<pre><code class="language-python">print(1)</code></pre>' in out

    def test_render_to_file(self, document_file, tmp_path, capsys):
        """``--out`` writes the page to a file instead of stdout."""
        target = tmp_path / "out.html"
        code = main([str(document_file), "-o", str(target), "--standalone", "--title", "Greeting"])
        assert code == EXIT_SUCCESS
        assert capsys.readouterr().out == ""
        html = target.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Greeting</title>" in html

    def test_read_from_stdin(self, monkeypatch, capsys):
        """A dash reads the document from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(DOCUMENT[:2])))
        assert main(["-", "--toc"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out.startswith('<nav id="table-of-contents"')

    def test_flags_applied(self, document_file, capsys):
        """Locale, theme and heading start reach the renderer."""
        args = [str(document_file), "--locale", "zh", "--theme", "dark", "--start-heading-index", "7", "--standalone"]
        assert main(args) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert '<html lang="zh" class="dark">' in out
        assert 'id="h2-7"' in out
        assert "复制" in out


@pytest.mark.integration
@pytest.mark.cli
class TestCLIConfiguration:
    """Configuration files on the command line."""

    def test_explicit_config(self, document_file, tmp_path, capsys):
        """Values from ``--config`` are applied."""
        config = tmp_path / "settings.toml"
        config.write_text('standalone = true\ntitle = "From config"\n', encoding="utf-8")
        assert main([str(document_file), "--config", str(config)]) == EXIT_SUCCESS
        assert "<title>From config</title>" in capsys.readouterr().out

    def test_flags_override_config(self, document_file, tmp_path, capsys):
        """Command-line flags win over the configuration file."""
        config = tmp_path / "settings.yaml"
        config.write_text("standalone: true\ntitle: From config\n", encoding="utf-8")
        assert main([str(document_file), "--config", str(config), "--title", "From flag"]) == EXIT_SUCCESS
        assert "<title>From flag</title>" in capsys.readouterr().out

    def test_discovered_config(self, document_file, tmp_path, capsys):
        """A dedicated config file in the working directory is found."""
        (tmp_path / ".blockrender.json").write_text(json.dumps({"standalone": True}), encoding="utf-8")
        assert main([str(document_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("<!DOCTYPE html>")

    def test_no_config_skips_discovery(self, document_file, tmp_path, capsys):
        """``--no-config`` ignores discovered files."""
        (tmp_path / ".blockrender.json").write_text(json.dumps({"standalone": True}), encoding="utf-8")
        assert main([str(document_file), "--no-config"]) == EXIT_SUCCESS
        assert "<!DOCTYPE html>" not in capsys.readouterr().out

    def test_env_var_config(self, document_file, tmp_path, monkeypatch, capsys):
        """The environment variable names a config file."""
        config = tmp_path / "env.toml"
        config.write_text("include_toc = true\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        assert main([str(document_file)]) == EXIT_SUCCESS
        assert '<nav id="table-of-contents"' in capsys.readouterr().out

    def test_invalid_config_value(self, document_file, tmp_path, capsys):
        """A config value that fails validation is a usage error."""
        config = tmp_path / "bad.toml"
        config.write_text('color_scheme = "sepia"\n', encoding="utf-8")
        assert main([str(document_file), "--config", str(config)]) == EXIT_USAGE_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_missing_config_file(self, document_file, tmp_path):
        """A config path that does not exist is a usage error."""
        assert main([str(document_file), "--config", str(tmp_path / "nope.toml")]) == EXIT_USAGE_ERROR


@pytest.mark.integration
@pytest.mark.cli
class TestCLIErrors:
    """Failure exit codes."""

    def test_missing_input(self, tmp_path, capsys):
        """An unreadable input file exits with an error."""
        assert main([str(tmp_path / "missing.json")]) == EXIT_ERROR
        assert "cannot read" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        """Malformed JSON exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text("[{", encoding="utf-8")
        assert main([str(path)]) == EXIT_ERROR
        assert "not valid JSON" in capsys.readouterr().err

    def test_input_not_utf8(self, tmp_path, capsys):
        """A file that is not UTF-8 exits with an error instead of a traceback."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"id": "p", "type": "paragraph", "content": "\xff"}]')
        assert main([str(path), "--no-config"]) == EXIT_ERROR
        err = capsys.readouterr().err
        assert "Error: cannot read" in err
        assert "Traceback" not in err

    def test_bad_theme_is_usage_error(self, document_file):
        """argparse rejects unknown choices with exit status 2."""
        with pytest.raises(SystemExit) as excinfo:
            main([str(document_file), "--theme", "sepia"])
        assert excinfo.value.code == EXIT_USAGE_ERROR

    def test_version(self, capsys):
        """``--version`` prints the program version."""
        with pytest.raises(SystemExit) as excinfo:
            create_parser().parse_args(["--version"])
        assert excinfo.value.code == 0
        assert capsys.readouterr().out.startswith("blockrender ")
