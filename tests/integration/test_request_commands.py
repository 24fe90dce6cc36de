"""Integration tests for request commands."""

from __future__ import annotations

import httpx
import respx
from typer.testing import CliRunner

from vra_cli.app import app

runner = CliRunner()

BASE = "https://vra.corp.local"
REQUESTS = f"{BASE}/catalog-service/api/consumer/requests"
COMMON_OPTS = [
    "--url", BASE,
    "--username", "user@corp.local",
    "--password", "secret",
    "--tenant", "vsphere.local",
]


def _mock_token() -> None:
    respx.post(f"{BASE}/identity/api/tokens").mock(
        return_value=httpx.Response(200, json={"id": "token-1"})
    )


class TestRequestShow:
    @respx.mock
    def test_show(self):
        _mock_token()
        respx.get(f"{REQUESTS}/request-12345").mock(
            return_value=httpx.Response(200, json={
                "id": "request-12345",
                "phase": "SUCCESSFUL",
                "requestCompletion": {
                    "requestCompletionState": "SUCCESSFUL",
                    "completionDetails": "Request succeeded.",
                },
            })
        )
        result = runner.invoke(app, ["request", "show", "request-12345", *COMMON_OPTS])
        assert result.exit_code == 0, result.output
        assert "SUCCESSFUL" in result.output
        assert "Request succeeded." in result.output

    @respx.mock
    def test_show_not_found(self):
        _mock_token()
        respx.get(f"{REQUESTS}/nope").mock(return_value=httpx.Response(404, json={}))
        result = runner.invoke(app, ["request", "show", "nope", *COMMON_OPTS])
        assert result.exit_code == 4


class TestRequestResources:
    @respx.mock
    def test_resources(self, vm_payload_no_ops):
        _mock_token()
        respx.get(f"{REQUESTS}/request-12345/resources").mock(
            return_value=httpx.Response(200, json={
                "content": [vm_payload_no_ops],
                "metadata": {"totalPages": 1},
            })
        )
        result = runner.invoke(
            app, ["request", "resources", "request-12345", "-f", "csv", *COMMON_OPTS],
        )
        assert result.exit_code == 0, result.output
        assert "hol-dev-11" in result.output
