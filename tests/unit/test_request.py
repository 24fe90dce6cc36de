"""Tests for the catalog Request handle."""

from __future__ import annotations

import pytest

from vra_cli.catalog.request import Request
from vra_cli.catalog.resource import Resource

REQUEST_ID = "request-12345"


@pytest.fixture
def request_payload() -> dict:
    return {
        "@type": "ResourceActionRequest",
        "id": REQUEST_ID,
        "requestNumber": 42,
        "state": "SUCCESSFUL",
        "phase": "SUCCESSFUL",
        "requestCompletion": {
            "requestCompletionState": "SUCCESSFUL",
            "completionDetails": "Request succeeded. Destroyed hol-dev-11.",
        },
    }


class TestRequest:
    def test_construction_does_not_fetch(self, mock_client):
        request = Request(mock_client, REQUEST_ID)
        assert request.id == REQUEST_ID
        assert request.data is None
        mock_client.get_json.assert_not_called()

    def test_refresh(self, mock_client, request_payload):
        mock_client.get_json.return_value = request_payload
        request = Request(mock_client, REQUEST_ID)
        request.refresh()
        mock_client.get_json.assert_called_once_with(
            f"/catalog-service/api/consumer/requests/{REQUEST_ID}"
        )
        assert request.data == request_payload

    def test_accessors_load_once(self, mock_client, request_payload):
        mock_client.get_json.return_value = request_payload
        request = Request(mock_client, REQUEST_ID)
        assert request.status == "SUCCESSFUL"
        assert request.completion_state == "SUCCESSFUL"
        assert request.completion_details.startswith("Request succeeded")
        assert mock_client.get_json.call_count == 1

    def test_successful(self, mock_client, request_payload):
        mock_client.get_json.return_value = request_payload
        request = Request(mock_client, REQUEST_ID)
        assert request.successful is True
        assert request.failed is False
        assert request.completed is True

    def test_failed(self, mock_client, request_payload):
        request_payload["phase"] = "FAILED"
        mock_client.get_json.return_value = request_payload
        request = Request(mock_client, REQUEST_ID)
        assert request.failed is True
        assert request.completed is True

    def test_in_progress(self, mock_client):
        mock_client.get_json.return_value = {"id": REQUEST_ID, "phase": "IN_PROGRESS"}
        request = Request(mock_client, REQUEST_ID)
        assert request.completed is False
        assert request.completion_state is None
        assert request.completion_details is None

    def test_resources(self, mock_client, vm_payload, non_vm_payload):
        mock_client.get_all_items.return_value = [vm_payload, non_vm_payload]
        resources = Request(mock_client, REQUEST_ID).resources()
        mock_client.get_all_items.assert_called_once_with(
            f"/catalog-service/api/consumer/requests/{REQUEST_ID}/resources"
        )
        assert all(isinstance(r, Resource) for r in resources)
        assert [r.name for r in resources] == ["hol-dev-11", "CentOS_6.6-82800195"]
