"""Tests for the CLI module."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from gremlin_translator.cli import main


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_bytecode() -> dict[str, Any]:
    """GraphSON bytecode with a source instruction and a nested traversal."""
    return {
        "@type": "g:Bytecode",
        "@value": {
            "source": [["withSack", {"@type": "g:Int32", "@value": 0}]],
            "step": [
                ["V", "1", "2", "3"],
                [
                    "local",
                    {
                        "@type": "g:Bytecode",
                        "@value": {"step": [["out"], ["out"], ["dedup"], ["fold"]]},
                    },
                ],
                ["inject", []],
            ],
        },
    }


@pytest.fixture
def bytecode_file(tmp_path: Path, sample_bytecode: dict[str, Any]) -> Path:
    """Write the sample bytecode to a temporary file."""
    path = tmp_path / "bytecode.json"
    path.write_text(json.dumps(sample_bytecode), encoding="utf-8")
    return path


class TestTranslateCommand:
    """Tests for the translate command."""

    def test_translate_from_stdin(
        self, cli_runner: CliRunner, sample_bytecode: dict[str, Any]
    ) -> None:
        result = cli_runner.invoke(
            main, ["translate"], input=json.dumps(sample_bytecode)
        )

        assert result.exit_code == 0
        assert result.output.strip() == (
            "g.V('1','2','3').local(out().out().dedup().fold()).inject()"
        )

    def test_translate_from_file(
        self, cli_runner: CliRunner, bytecode_file: Path
    ) -> None:
        result = cli_runner.invoke(main, ["translate", "-i", str(bytecode_file)])

        assert result.exit_code == 0
        assert "local(out().out().dedup().fold())" in result.output

    def test_translate_options(
        self, cli_runner: CliRunner, bytecode_file: Path
    ) -> None:
        result = cli_runner.invoke(
            main,
            [
                "translate",
                "-i", str(bytecode_file),
                "--source", "airroutes",
                "--strict",
                "--include-sources",
            ],
        )

        assert result.exit_code == 0
        assert result.output.strip() == (
            "airroutes.withSack(0).V('1','2','3')"
            ".local(out().out().dedup().fold()).inject([])"
        )

    def test_translate_escape_strings(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            main,
            ["translate", "--escape-strings"],
            input=json.dumps({"step": [["has", "name", "O'Hare"]]}),
        )

        assert result.exit_code == 0
        assert result.output.strip() == "g.has('name','O\\'Hare')"

    def test_translate_to_output_file(
        self, cli_runner: CliRunner, bytecode_file: Path, tmp_path: Path
    ) -> None:
        output = tmp_path / "query.groovy"
        result = cli_runner.invoke(
            main, ["translate", "-i", str(bytecode_file), "-o", str(output)]
        )

        assert result.exit_code == 0
        assert "Query written to" in result.output
        assert output.read_text(encoding="utf-8").startswith("g.V('1','2','3')")

    def test_translate_empty_input_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(main, ["translate"], input="   ")

        assert result.exit_code != 0
        assert "Empty input" in result.output

    def test_translate_invalid_json_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(main, ["translate"], input="{oops")

        assert result.exit_code == 1
        assert "Error translating bytecode" in result.output

    def test_translate_depth_exceeded_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            main,
            ["translate", "--max-depth", "2"],
            input=json.dumps({"step": [["inject", [[[1]]]]]}),
        )

        assert result.exit_code == 1
        assert "maximum nesting depth" in result.output

    def test_translate_verbose_logs(
        self, cli_runner: CliRunner, bytecode_file: Path
    ) -> None:
        result = cli_runner.invoke(
            main, ["translate", "-i", str(bytecode_file), "--verbose"]
        )

        assert result.exit_code == 0
        assert "[DEBUG] Read bytecode with 1 source and 3 step instructions" in result.output


class TestInitBytecodeCommand:
    """Tests for the init-bytecode command."""

    def test_init_bytecode_outputs_template(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(main, ["init-bytecode"])

        assert result.exit_code == 0
        template = json.loads(result.output)
        assert template["@type"] == "g:Bytecode"
        assert template["@value"]["step"][0] == ["V", "3"]

    def test_template_translates(self, cli_runner: CliRunner) -> None:
        template = cli_runner.invoke(main, ["init-bytecode"]).output
        result = cli_runner.invoke(main, ["translate"], input=template)

        assert result.exit_code == 0
        assert result.output.strip() == (
            "g.V('3').hasLabel('airport').has('code',within(['AUS','DFW']))"
            ".repeat(out('route').simplePath()).times(2).path().by('code')"
        )


class TestVersion:
    """Tests for the --version option."""

    def test_version_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "gremlin-translator" in result.output
