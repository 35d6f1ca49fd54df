"""Unit tests for the workflow trigger endpoints."""

import json

import pytest
from fastapi.testclient import TestClient

from actionkit.api.endpoints import get_capabilities, get_workflow_configs, load_workflow_configs
from actionkit.clients import HttpxSender
from actionkit.api.main import app
from actionkit.capabilities import Capabilities
from actionkit.signing import StaticSecretProvider
from tests.helpers.constants import NOW
from tests.helpers.factories import make_liquidity_config, make_ostium_config
from tests.helpers.mocks import MockHttp


@pytest.fixture
def ostium_http():
    return MockHttp(json.dumps({"success": True, "data": {"txHash": "0xfeed"}}))


@pytest.fixture
def client(ostium_http):
    """Test client with two configured workflows and mock collaborators."""
    configs = {
        "ostium-trading": make_ostium_config(),
        "liquidity-position": make_liquidity_config(),
    }
    app.dependency_overrides[get_workflow_configs] = lambda: configs
    app.dependency_overrides[get_capabilities] = lambda: Capabilities(
        http=ostium_http,
        secrets=StaticSecretProvider({"OSTIUM_HMAC_SECRET": "k"}),
        clock=lambda: NOW,
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestTriggerWorkflow:
    """Tests for POST /workflows/{workflow}."""

    def test_runs_with_base_config(self, client, ostium_http):
        response = client.post("/workflows/ostium-trading")

        assert response.status_code == 200
        assert response.json() == {"success": True, "txHash": "0xfeed"}
        body = json.loads(ostium_http.requests[0].body)
        assert body["leverage"] == 5

    def test_override_is_merged(self, client, ostium_http):
        response = client.post("/workflows/ostium-trading", json={"leverage": 10, "side": "short"})

        assert response.status_code == 200
        body = json.loads(ostium_http.requests[0].body)
        assert body["leverage"] == 10
        assert body["side"] == "short"
        assert body["market"] == "BTC-USD"

    def test_invalid_override_returns_422(self, client, ostium_http):
        response = client.post("/workflows/ostium-trading", json={"side": "sideways"})
        assert response.status_code == 422
        assert ostium_http.requests == []

    def test_failure_is_a_200_result(self, client):
        """Workflow failures are results, not HTTP errors."""
        response = client.post("/workflows/liquidity-position", json={"tickLower": -125})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert "aligned" in data["error"]

    def test_liquidity_plan(self, client):
        data = client.post("/workflows/liquidity-position").json()
        assert data["success"] is True
        assert data["unlockData"].startswith("0x")

    def test_unknown_workflow(self, client):
        assert client.post("/workflows/does-not-exist").status_code == 404

    def test_unconfigured_workflow(self, client):
        response = client.post("/workflows/uniswap-swap")
        assert response.status_code == 404
        assert "not configured" in response.json()["detail"]

    def test_list_workflows(self, client):
        data = client.get("/workflows").json()
        assert "read-feeds" in data["workflows"]
        assert data["configured"] == ["liquidity-position", "ostium-trading"]


class TestLoadWorkflowConfigs:
    """Tests for loading configs from a directory."""

    def test_loads_valid_and_skips_invalid(self, tmp_path):
        (tmp_path / "ostium-trading.json").write_text(
            make_ostium_config().model_dump_json(by_alias=True)
        )
        (tmp_path / "lifi-swap.json").write_text('{"chain": "ARBITRUM"}')
        (tmp_path / "aave-lending.json").write_text("not json")

        configs = load_workflow_configs(tmp_path)

        assert list(configs) == ["ostium-trading"]
        assert configs["ostium-trading"].market == "BTC-USD"

    def test_missing_directory(self, tmp_path):
        assert load_workflow_configs(tmp_path / "nope") == {}


class TestGetCapabilities:
    """Tests for the default collaborator provider."""

    def test_http_client_closed_after_request(self):
        provider = get_capabilities()
        capabilities = next(provider)
        assert isinstance(capabilities.http, HttpxSender)
        assert not capabilities.http.client.is_closed

        provider.close()

        assert capabilities.http.client.is_closed
