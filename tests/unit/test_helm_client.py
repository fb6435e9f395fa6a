"""Tests for the Helm CLI client."""

import asyncio
import json
import sys

import pytest
from pydantic import ValidationError

from helm_client import BaseClient, CommandResult, HelmCommandError, ReleaseClient, RepoClient, is_network_failure


def python_script(code: str) -> tuple[str, ...]:
    return ("-c", code)


class TestNetworkClassification:
    @pytest.mark.parametrize(
        "text",
        [
            "Error: looks like the repo could not be reached: dial tcp: i/o timeout",
            "connection refused",
            "Client.Timeout exceeded while awaiting headers",
            "network is unreachable",
        ],
    )
    def test_network(self, text):
        assert is_network_failure(text)

    @pytest.mark.parametrize("text", ["Error: chart \"nginx\" version \"9.9.9\" not found", "", "no repositories to show"])
    def test_not_network(self, text):
        assert not is_network_failure(text)


class TestRun:
    """Runs the current Python interpreter in place of helm."""

    def test_success(self):
        client = BaseClient(binary=sys.executable)
        result = asyncio.run(client._run(*python_script("print('hello')")))
        assert isinstance(result, CommandResult)
        assert result.returncode == 0
        assert result.stdout.strip() == "hello"

    def test_non_zero_exit(self):
        client = BaseClient(binary=sys.executable)
        code = "import sys; sys.stderr.write('Error: chart not found'); sys.exit(1)"
        with pytest.raises(HelmCommandError) as exc:
            asyncio.run(client._run(*python_script(code)))
        assert exc.value.returncode == 1
        assert exc.value.message == "Error: chart not found"
        assert exc.value.network is False

    def test_network_failure_flagged(self):
        client = BaseClient(binary=sys.executable)
        code = "import sys; sys.stderr.write('dial tcp 10.0.0.1:443: connect: connection refused'); sys.exit(1)"
        with pytest.raises(HelmCommandError) as exc:
            asyncio.run(client._run(*python_script(code)))
        assert exc.value.network is True

    def test_missing_binary(self, tmp_path):
        client = BaseClient(binary=str(tmp_path / "no-such-helm"))
        with pytest.raises(HelmCommandError) as exc:
            asyncio.run(client._run("repo", "list"))
        assert exc.value.returncode is None
        assert exc.value.network is False

    def test_timeout_is_network_failure(self):
        client = BaseClient(binary=sys.executable, timeout=0.2)
        with pytest.raises(HelmCommandError) as exc:
            asyncio.run(client._run(*python_script("import time; time.sleep(5)")))
        assert exc.value.network is True


def scripted(client, stdout: str):
    """Replace _run with one returning fixed stdout and recording args."""
    calls = []

    async def run(*args):
        calls.append(args)
        return CommandResult(args=args, returncode=0, stdout=stdout, stderr="")

    client._run = run
    return calls


class TestRepoClient:
    def test_repo_list(self):
        client = RepoClient()
        calls = scripted(client, json.dumps([{"name": "bitnami", "url": "https://charts.bitnami.com/bitnami"}]))
        repos = asyncio.run(client.repo_list())
        assert [r.name for r in repos] == ["bitnami"]
        assert calls == [("repo", "list", "-o", "json")]

    def test_repo_list_bad_output(self):
        client = RepoClient()
        scripted(client, "NAME URL\nbitnami https://x")
        with pytest.raises(ValidationError):
            asyncio.run(client.repo_list())

    def test_search(self):
        client = RepoClient()
        calls = scripted(
            client,
            json.dumps([{"name": "bitnami/nginx", "version": "15.1.0", "app_version": "1.25.0", "description": "NGINX"}]),
        )
        hits = asyncio.run(client.search("bitnami", "nginx", "15.1.0"))
        assert hits[0].name == "bitnami/nginx"
        assert hits[0].app_version == "1.25.0"
        assert calls == [("search", "repo", "bitnami/nginx", "--version", "15.1.0", "-o", "json")]

    def test_pull_returns_chart_dir(self, tmp_path):
        client = RepoClient()
        calls = scripted(client, "")
        chart_dir = asyncio.run(client.pull("bitnami", "nginx", "15.1.0", tmp_path))
        assert chart_dir == tmp_path / "nginx"
        assert calls[0][:4] == ("pull", "bitnami/nginx", "--version", "15.1.0")
        assert "--untar" in calls[0]


class TestReleaseClient:
    def test_get_values(self):
        client = ReleaseClient()
        calls = scripted(client, '{"replicaCount": 2}')
        assert asyncio.run(client.get_values("web", "prod")) == {"replicaCount": 2}
        assert calls == [("get", "values", "web", "-n", "prod", "-o", "json")]

    def test_get_values_invalid_json(self):
        client = ReleaseClient()
        scripted(client, "replicaCount: 2")
        with pytest.raises(ValueError):
            asyncio.run(client.get_values("web", "prod"))
