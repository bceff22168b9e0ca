"""Tests for buildconfig_cli.errors module."""

from __future__ import annotations

import pytest
import yaml
from pydantic import BaseModel, ValidationError

from buildconfig_cli.errors import (
    EXIT_SYSTEM_ERROR,
    EXIT_USER_ERROR,
    CLIError,
    format_pydantic_error,
    handle_file_not_found,
    handle_yaml_error,
)


class _Model(BaseModel):
    name: str
    count: int


class TestCLIError:
    """Tests for CLIError."""

    def test_default_exit_code(self) -> None:
        assert CLIError("boom").exit_code == EXIT_USER_ERROR

    def test_custom_exit_code(self) -> None:
        assert CLIError("boom", exit_code=EXIT_SYSTEM_ERROR).exit_code == 2

    def test_show_prints_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        CLIError("Profile 'x' not found").show()
        assert "Profile 'x' not found" in capsys.readouterr().out


class TestFormatPydanticError:
    """Tests for format_pydantic_error."""

    def test_lists_each_location(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            _Model.model_validate({"count": "many"})

        formatted = format_pydantic_error(exc_info.value)
        assert formatted.startswith("Validation failed:")
        assert "  - name: Field required" in formatted
        assert "  - count:" in formatted


class TestHandlers:
    """Tests for the handle_* helpers."""

    def test_yaml_error_has_line_number(self) -> None:
        try:
            yaml.safe_load("a: b\n  c: d\n")
        except yaml.YAMLError as e:
            with pytest.raises(CLIError, match="line 2") as exc_info:
                handle_yaml_error(e, "buildconfig.yaml")
        assert exc_info.value.exit_code == EXIT_USER_ERROR

    def test_file_not_found_is_system_error(self) -> None:
        with pytest.raises(CLIError, match="File not found: missing.yaml") as exc_info:
            handle_file_not_found("missing.yaml")
        assert exc_info.value.exit_code == EXIT_SYSTEM_ERROR
