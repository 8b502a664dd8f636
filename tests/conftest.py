"""Pytest configuration for ipset-client tests."""

import os
from collections.abc import Sequence
from unittest.mock import patch

import pytest
from ipset_client.client import IpsetClient
from ipset_client.models import CommandResult
from ipset_client.settings import IpsetSettings, reset_settings

# Test constants
TEST_SET_NAME = "blocklist"
TEST_MEMBER = "10.0.0.1"

SAMPLE_LIST_OUTPUT = (
    "Name: blocklist\n"
    "Type: hash:ip\n"
    "Revision: 4\n"
    "Header: family inet hashsize 1024 maxelem 65536\n"
    "Size in memory: 1024\n"
    "References: 0\n"
    "Members:\n"
    "10.0.0.1\n"
    "10.0.0.2\n"
    "10.0.0.1\n"
)

SET_NOT_FOUND_LINE = (
    "ipset v7.1: The set with the given name does not exist\n"
)


class FakeRunner:
    """Command runner returning canned results and recording calls."""

    def __init__(self, result: CommandResult | None = None) -> None:
        self.result = result or CommandResult()
        self.calls: list[tuple[str, list[str]]] = []

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        self.calls.append((command, list(args)))
        return self.result

    def respond(self, stdout: str = "", stderr: str = "", returncode: int = 0) -> None:
        self.result = CommandResult(
            stdout=stdout, stderr=stderr, returncode=returncode
        )


@pytest.fixture(autouse=True)
def reset_settings_after_test():
    """Reset settings singleton after each test."""
    yield
    reset_settings()


@pytest.fixture
def clean_env():
    """Remove ipset-related environment variables."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def settings(clean_env) -> IpsetSettings:
    """Settings built from an empty environment."""
    return IpsetSettings(_env_file=None)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A runner that never starts a process."""
    return FakeRunner()


@pytest.fixture
def client(fake_runner, settings) -> IpsetClient:
    """Client wired to the fake runner."""
    return IpsetClient(runner=fake_runner, settings=settings)
