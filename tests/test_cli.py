"""Tests for the ipset-client command line."""

import json
import os
from unittest.mock import patch

import pytest
from ipset_client import cli
from ipset_client.client import IpsetClient

from tests.conftest import SAMPLE_LIST_OUTPUT, SET_NOT_FOUND_LINE, FakeRunner

pytestmark = pytest.mark.unit


@pytest.fixture
def cli_runner(clean_env):
    """Patch the CLI to build clients around a fake runner."""
    runner = FakeRunner()

    def build(args):
        return IpsetClient(runner=runner)

    with patch.object(cli, "build_client", side_effect=build):
        yield runner


class TestListCommand:
    """Tests for the list subcommand."""

    def test_text_output(self, cli_runner, capsys):
        """Test list prints header fields and sorted members."""
        cli_runner.respond(stdout=SAMPLE_LIST_OUTPUT)

        assert cli.main(["list", "blocklist"]) == 0

        out = capsys.readouterr().out
        assert "Name: blocklist" in out
        assert "Members (2):" in out
        assert out.index("10.0.0.1") < out.index("10.0.0.2")

    def test_json_output(self, cli_runner, capsys):
        """Test list --json prints the description dictionary."""
        cli_runner.respond(stdout=SAMPLE_LIST_OUTPUT)

        assert cli.main(["list", "blocklist", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "blocklist"
        assert data["members"] == ["10.0.0.1", "10.0.0.2"]

    def test_missing_set(self, cli_runner, capsys):
        """Test errors exit with status 1."""
        cli_runner.respond(stderr=SET_NOT_FOUND_LINE)

        assert cli.main(["list", "blocklist"]) == 1
        assert "does not exist" in capsys.readouterr().err


class TestMemberCommands:
    """Tests for the add and del subcommands."""

    def test_add(self, cli_runner):
        """Test add runs the tool with the member."""
        assert cli.main(["add", "blocklist", "10.0.0.1"]) == 0
        assert cli_runner.calls == [("ipset", ["add", "blocklist", "10.0.0.1"])]

    def test_add_existing_fails(self, cli_runner):
        """Test add of an existing member fails without --exist."""
        cli_runner.respond(
            stderr="Element cannot be added to the set: it's already added"
        )

        assert cli.main(["add", "blocklist", "10.0.0.1"]) == 1

    def test_add_existing_with_exist_flag(self, cli_runner, capsys):
        """Test --exist tolerates an existing member."""
        cli_runner.respond(
            stderr="Element cannot be added to the set: it's already added"
        )

        assert cli.main(["add", "blocklist", "10.0.0.1", "--exist"]) == 0
        assert "already in blocklist" in capsys.readouterr().out

    def test_del(self, cli_runner):
        """Test del runs the tool with the member."""
        assert cli.main(["del", "blocklist", "10.0.0.1"]) == 0
        assert cli_runner.calls == [("ipset", ["del", "blocklist", "10.0.0.1"])]

    def test_del_absent_with_exist_flag(self, cli_runner):
        """Test --exist tolerates an absent member."""
        cli_runner.respond(
            stderr="Element cannot be deleted from the set: it's not added"
        )

        assert cli.main(["del", "blocklist", "10.0.0.1", "--exist"]) == 0


class TestBuildClient:
    """Tests for build_client."""

    def test_command_override(self, clean_env):
        """Test --command overrides the configured executable."""
        parser_args = type("Args", (), {"command_path": "/opt/ipset"})()

        client = cli.build_client(parser_args)

        assert client.settings.ipset_command == "/opt/ipset"

    def test_usage_error(self, clean_env):
        """Test a missing subcommand is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])

        assert exc_info.value.code == 2


class TestConfigurationErrors:
    """Tests for configuration problems reported by the CLI."""

    def test_broken_phrases_file_exits_1(self, clean_env, tmp_path, capsys):
        """Test an unparsable phrases file is reported, not raised."""
        path = tmp_path / "phrases.yaml"
        path.write_text("set_not_found: [unclosed\n")

        with patch.dict(os.environ, {"IPSET_PHRASES_FILE": str(path)}):
            assert cli.main(["list", "x"]) == 1

        assert "Invalid YAML" in capsys.readouterr().err

    def test_blank_command_exits_1(self, clean_env, capsys):
        """Test a whitespace-only --command is rejected."""
        assert cli.main(["--command", "  ", "list", "x"]) == 1
        assert "--command must not be empty" in capsys.readouterr().err

    def test_command_is_stripped(self, clean_env):
        """Test surrounding whitespace is removed from --command."""
        parser_args = type("Args", (), {"command_path": " /opt/ipset "})()

        client = cli.build_client(parser_args)

        assert client.settings.ipset_command == "/opt/ipset"
