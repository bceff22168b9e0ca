"""Tests for buildconfig render command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from buildconfig_cli.commands.render import render


class TestRenderCommand:
    """Tests for render command."""

    def test_render_main_profile(self, cli_runner: CliRunner, valid_buildconfig_yaml: Path) -> None:
        result = cli_runner.invoke(render, ["--file", str(valid_buildconfig_yaml)])

        assert result.exit_code == 0
        assert result.output.startswith("// Generated by buildconfig")
        assert "package com.example;" in result.output
        assert "public final class BuildConfig {" in result.output
        assert '    public static final String FOO = "bar";' in result.output
        assert "    public static final long SEED = 42L;" in result.output
        assert result.output.endswith("}\n")

    def test_render_named_profile(
        self, cli_runner: CliRunner, valid_buildconfig_yaml: Path
    ) -> None:
        result = cli_runner.invoke(
            render, ["--file", str(valid_buildconfig_yaml), "--profile", "test"]
        )

        assert result.exit_code == 0
        assert "public final class TestConfig {" in result.output
        assert "public static final int TIMEOUT = 30;" in result.output
        assert "FOO" not in result.output

    def test_render_unknown_profile(
        self, cli_runner: CliRunner, valid_buildconfig_yaml: Path
    ) -> None:
        result = cli_runner.invoke(
            render, ["--file", str(valid_buildconfig_yaml), "-p", "staging"]
        )

        assert result.exit_code == 1
        assert "staging" in result.output
        assert "main, test" in result.output

    def test_render_invalid_profile(
        self, cli_runner: CliRunner, partial_buildconfig_yaml: Path
    ) -> None:
        result = cli_runner.invoke(
            render, ["--file", str(partial_buildconfig_yaml), "-p", "test"]
        )

        assert result.exit_code == 1
        assert "RETRIES" in result.output

    def test_render_writes_nothing(
        self, cli_runner: CliRunner, valid_buildconfig_yaml: Path
    ) -> None:
        cli_runner.invoke(render, ["--file", str(valid_buildconfig_yaml)])
        assert not (valid_buildconfig_yaml.parent / "build").exists()
