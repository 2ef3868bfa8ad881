"""Tests for CLI commands."""

import pytest
from unittest.mock import patch
from typer.testing import CliRunner

from curator.cli import app
from curator.core import RELATED_META_KEY
from curator.core.stores import SQLiteContentStore, SQLiteMetadataStore


runner = CliRunner()


@pytest.fixture
def storage(temp_dir, monkeypatch):
    """Point the CLI's stores at a temporary directory."""
    monkeypatch.setenv("CURATOR_STORAGE_PATH", str(temp_dir))
    monkeypatch.delenv("CURATOR_CONFIG", raising=False)
    return temp_dir


@pytest.fixture
def settings_file(temp_dir):
    """A settings file that curates posts."""
    path = temp_dir / "curator.yaml"
    path.write_text("content_kinds: [post]\n")
    return path


class TestVersionCommand:
    """Tests for version flag."""

    def test_version_flag(self):
        """--version shows version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "curator version" in result.output
        assert "0.1.0" in result.output


class TestSetupCommand:
    """Tests for setup command."""

    def test_setup_creates_terms(self, storage):
        """Setup provisions terms, then reports nothing to do."""
        result = runner.invoke(app, ["setup"])

        assert result.exit_code == 0
        assert "cur-curated-item" in result.output

        result = runner.invoke(app, ["setup"])

        assert "already exist" in result.output

    def test_setup_missing_config(self, storage):
        """A missing settings file is an error."""
        result = runner.invoke(app, ["setup", "--config", str(storage / "nope.yaml")])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestModulesCommand:
    """Tests for modules command."""

    def test_modules_table(self, storage):
        """Modules lists every configured module."""
        result = runner.invoke(app, ["modules"])

        assert result.exit_code == 0
        assert "curator" in result.output
        assert "featurer" in result.output
        assert "pinner" in result.output
        assert "Default status: publish" in result.output

    def test_modules_with_config(self, storage, settings_file):
        """Settings are reflected in the listing."""
        result = runner.invoke(app, ["modules", "--config", str(settings_file)])

        assert result.exit_code == 0
        assert "Content kinds: post" in result.output

    def test_modules_missing_config(self, storage):
        """A missing settings file is reported, not raised."""
        result = runner.invoke(app, ["modules", "--config", "missing.yaml"])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestCurateCommands:
    """Tests for add, curate, uncurate and related."""

    def test_add(self, storage):
        """Add creates a source item."""
        result = runner.invoke(app, ["add", "Hello World"])

        assert result.exit_code == 0
        assert "Added" in result.output
        assert SQLiteContentStore().get_item("1").title == "Hello World"

    def test_curate_and_uncurate(self, storage):
        """Curating links the items, uncurating removes the link."""
        runner.invoke(app, ["setup"])
        runner.invoke(app, ["add", "Hello World"])

        result = runner.invoke(app, ["curate", "1"])

        assert result.exit_code == 0
        assert "Curated '1'" in result.output
        curated_id = SQLiteMetadataStore().get("1", RELATED_META_KEY)
        assert SQLiteContentStore().get_item(curated_id).title == "Hello World"

        result = runner.invoke(app, ["related", curated_id])
        assert result.exit_code == 0
        assert "1" in result.output

        result = runner.invoke(app, ["uncurate", "1"])

        assert result.exit_code == 0
        assert "Removed" in result.output
        assert SQLiteContentStore().get_item(curated_id) is None

    def test_curate_missing_item(self, storage):
        """Curating an unknown item fails."""
        result = runner.invoke(app, ["curate", "404"])

        assert result.exit_code == 1
        assert "not found" in result.output.lower()

    def test_curate_disabled_module(self, storage):
        """Curating with a disabled module fails."""
        runner.invoke(app, ["setup"])
        runner.invoke(app, ["add", "Hello World"])

        result = runner.invoke(app, ["curate", "1", "--module", "featurer"])

        assert result.exit_code == 1
        assert "unknown or disabled" in result.output

    def test_curate_with_title(self, storage):
        """A title can be given instead of reading the source item."""
        runner.invoke(app, ["setup"])

        result = runner.invoke(app, ["curate", "77", "--title", "External"])

        assert result.exit_code == 0

    def test_uncurate_not_curated(self, storage):
        """Uncurating an uncurated item is harmless."""
        result = runner.invoke(app, ["uncurate", "5"])

        assert result.exit_code == 0
        assert "was not curated" in result.output

    def test_related_none(self, storage):
        """Related fails when there is no link."""
        result = runner.invoke(app, ["related", "5"])

        assert result.exit_code == 1
        assert "No related item" in result.output

    def test_related_missing_config(self, storage):
        """Related builds its engine the same way as the other commands."""
        result = runner.invoke(app, ["related", "5", "--config", "missing.yaml"])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestSetStatusCommand:
    """Tests for set-status command."""

    def test_publish_curates(self, storage, settings_file):
        """Publishing an eligible item curates it."""
        runner.invoke(app, ["setup"])
        runner.invoke(app, ["add", "Hello World"])

        result = runner.invoke(
            app, ["set-status", "1", "publish", "--config", str(settings_file)]
        )

        assert result.exit_code == 0
        assert "draft -> publish" in result.output
        assert "Curated '1'" in result.output

        result = runner.invoke(
            app, ["set-status", "1", "draft", "--config", str(settings_file)]
        )

        assert result.exit_code == 0
        assert SQLiteMetadataStore().get("1", RELATED_META_KEY) is None

    def test_ineligible_kind(self, storage):
        """Without eligible kinds only the status changes."""
        runner.invoke(app, ["add", "Hello World"])

        result = runner.invoke(app, ["set-status", "1", "publish"])

        assert result.exit_code == 0
        assert "Curated" not in result.output
        assert SQLiteContentStore().get_item("1").status == "publish"

    def test_missing_item(self, storage):
        """Unknown items are an error."""
        result = runner.invoke(app, ["set-status", "9", "publish"])

        assert result.exit_code == 1


class TestInitConfigCommand:
    """Tests for init-config command."""

    def test_init_config(self, temp_dir):
        """A settings file is written."""
        path = temp_dir / "curator.yaml"

        result = runner.invoke(app, ["init-config", str(path)])

        assert result.exit_code == 0
        assert path.exists()

    def test_init_config_declined(self, temp_dir):
        """Existing files are kept when overwrite is declined."""
        path = temp_dir / "curator.yaml"
        path.write_text("default_status: draft\n")

        with patch("curator.config.generate_settings_template") as mock_generate:
            result = runner.invoke(app, ["init-config", str(path)], input="n\n")

        assert "Cancelled" in result.output
        mock_generate.assert_not_called()
        assert path.read_text() == "default_status: draft\n"
