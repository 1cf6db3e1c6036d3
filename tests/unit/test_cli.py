"""Tests for the uuid-codec command line."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from uuid_codec.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Provide a click test runner."""
    return CliRunner()


def invoke(runner: CliRunner, *args: str):
    with runner.isolated_filesystem():
        return runner.invoke(cli, list(args))


class TestGenerateCommand:
    """Tests for `uuid-codec generate`."""

    def test_generate_v4_default(self, runner: CliRunner) -> None:
        """Test that one random UUID is printed by default."""
        result = invoke(runner, "generate")

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 1
        assert len(lines[0]) == 36
        assert lines[0][14] == "4"

    def test_generate_v4_count(self, runner: CliRunner) -> None:
        """Test batch generation."""
        result = invoke(runner, "generate", "--count", "3")

        assert result.exit_code == 0
        assert len(set(result.output.strip().splitlines())) == 3

    def test_generate_v5(self, runner: CliRunner) -> None:
        """Test the www.example.com vector."""
        result = invoke(
            runner, "generate", "--uuid-version", "5", "--namespace", "dns", "--name", "www.example.com"
        )

        assert result.exit_code == 0
        assert result.output.strip() == "2ed6657d-e927-568b-95e1-2665a8aea6a2"

    def test_generate_v5_base64url(self, runner: CliRunner) -> None:
        """Test an alternative output format."""
        result = invoke(
            runner,
            "generate",
            "--uuid-version", "5",
            "--namespace", "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
            "--name", "www.example.com",
            "--format", "hex",
        )

        assert result.exit_code == 0
        assert result.output.strip() == "2ed6657de927568b95e12665a8aea6a2"

    def test_generate_v5_without_name(self, runner: CliRunner) -> None:
        """Test that version 5 requires --name."""
        result = invoke(runner, "generate", "--uuid-version", "5")

        assert result.exit_code == 1
        assert "--name is required" in result.output

    def test_generate_v5_bad_namespace(self, runner: CliRunner) -> None:
        """Test that an unknown namespace is reported."""
        result = invoke(runner, "generate", "--uuid-version", "5", "--namespace", "nope", "--name", "x")

        assert result.exit_code == 1
        assert "Unknown namespace: nope" in result.output

    def test_generate_uses_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that defaults come from the configuration file."""
        config = tmp_path / "uuid-codec.toml"
        config.write_text('[generation]\nversion = 5\nnamespace = "dns"\n\n[output]\nformat = "base64"\n')

        result = runner.invoke(cli, ["--config", str(config), "generate", "--name", "www.example.com"])

        assert result.exit_code == 0
        assert result.output.strip() == "LtZlfeknVouV4SZlqK6mog=="

    @pytest.mark.parametrize(
        "content",
        [
            "[generation]\nversion = 7\n",
            '[output]\nformat = "octal"\n',
            "[generation\nversion = 4\n",
        ],
    )
    def test_bad_config_reported(self, runner: CliRunner, tmp_path: Path, content: str) -> None:
        """Test that an unusable configuration file is an error, not a traceback."""
        config = tmp_path / "uuid-codec.toml"
        config.write_text(content)

        result = runner.invoke(cli, ["--config", str(config), "generate"])

        assert result.exit_code == 1
        assert "Error: Invalid configuration" in result.output
        assert not isinstance(result.exception, (ValueError, OSError))

    def test_bad_config_found_by_search(self, runner: CliRunner) -> None:
        """Test that a bad file found in the working directory is reported."""
        with runner.isolated_filesystem():
            Path("uuid-codec.toml").write_text("[generation]\nversion = 7\n")
            result = runner.invoke(cli, ["generate"])

        assert result.exit_code == 1
        assert "Error: Invalid configuration" in result.output


class TestParseCommand:
    """Tests for `uuid-codec parse`."""

    def test_parse_text(self, runner: CliRunner) -> None:
        """Test the human-readable output."""
        result = invoke(runner, "parse", "44b35f73-cfbd-43b4-8fef-ca7baea1375f")

        assert result.exit_code == 0
        assert "UUID: 44b35f73-cfbd-43b4-8fef-ca7baea1375f" in result.output
        assert "version:   4" in result.output
        assert "variant:   10" in result.output
        assert "base64url: RLNfc8-9Q7SP78p7rqE3Xw" in result.output

    def test_parse_json(self, runner: CliRunner) -> None:
        """Test the JSON output."""
        result = invoke(runner, "parse", "44B35F73-CFBD-43B4-8FEF-CA7BAEA1375F", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["uuid"] == "44b35f73-cfbd-43b4-8fef-ca7baea1375f"
        assert data["base64"] == "RLNfc8+9Q7SP78p7rqE3Xw=="
        assert data["version"] == 4
        assert data["variant"] == 2

    def test_parse_invalid(self, runner: CliRunner) -> None:
        """Test that parse errors exit with status 1."""
        result = invoke(runner, "parse", "44b35f73-cfbd-43b4-8fef0ca7baea1375f")

        assert result.exit_code == 1
        assert "Error: Invalid UUID string" in result.output


class TestValidateCommand:
    """Tests for `uuid-codec validate`."""

    def test_validate_valid(self, runner: CliRunner) -> None:
        """Test a valid UUID."""
        result = invoke(runner, "validate", "44b35f73-cfbd-43b4-8fef-ca7baea1375f")

        assert result.exit_code == 0
        assert "Valid UUID" in result.output

    def test_validate_invalid_quiet(self, runner: CliRunner) -> None:
        """Test quiet mode exit status."""
        result = invoke(runner, "validate", "not-a-uuid", "--quiet")

        assert result.exit_code == 1
        assert result.output == ""

    def test_validate_lenient(self, runner: CliRunner) -> None:
        """Test that lenient mode accepts other versions with a warning."""
        result = invoke(runner, "validate", "6ba7b810-9dad-11d1-80b4-00c04fd430c8", "--lenient")

        assert result.exit_code == 0
        assert "warning: UUID version 1 is not 4 or 5" in result.output

    def test_validate_strict_rejects_version(self, runner: CliRunner) -> None:
        """Test that strict mode rejects other versions."""
        result = invoke(runner, "validate", "6ba7b810-9dad-11d1-80b4-00c04fd430c8")

        assert result.exit_code == 1


class TestEncodeCommand:
    """Tests for `uuid-codec encode`."""

    def test_encode_big_endian(self, runner: CliRunner) -> None:
        """Test importing a network-order buffer."""
        result = invoke(runner, "encode", "44b35f73cfbd43b48fefca7baea1375f", "--format", "base64")

        assert result.exit_code == 0
        assert result.output.strip() == "RLNfc8+9Q7SP78p7rqE3Xw=="

    def test_encode_little_endian(self, runner: CliRunner) -> None:
        """Test importing a GUID-order buffer."""
        result = invoke(runner, "encode", "33221100554477668899aabbccddeeff", "--little-endian")

        assert result.exit_code == 0
        assert result.output.strip() == "00112233-4455-6677-8899-aabbccddeeff"

    def test_encode_not_hex(self, runner: CliRunner) -> None:
        """Test that non-hex input is rejected."""
        result = invoke(runner, "encode", "zz")

        assert result.exit_code == 1
        assert "Not a hex string" in result.output

    def test_encode_wrong_size(self, runner: CliRunner) -> None:
        """Test that a buffer of the wrong size is rejected."""
        result = invoke(runner, "encode", "0011")

        assert result.exit_code == 1
        assert "exactly 16 bytes" in result.output
