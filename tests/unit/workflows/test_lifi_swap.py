"""Tests for the LI.FI aggregated swap workflow."""

import json
from urllib.parse import parse_qs, urlsplit

from actionkit.constants import NATIVE_TOKEN_PLACEHOLDER, ZERO_ADDRESS
from actionkit.encoding import ActionKind, decode_action
from actionkit.errors import ErrorKind
from actionkit.workflows import run_lifi_swap
from actionkit.workflows.lifi_swap import build_quote_request, explorer_link
from tests.helpers.constants import LIFI_DIAMOND, LIFI_RECEIVER, USDC, WALLET, WETH
from tests.helpers.factories import make_lifi_config

QUOTE = {
    "estimate": {"toAmount": "300000000000000"},
    "transactionRequest": {"to": LIFI_DIAMOND, "data": "0x4630a0d8" + "00" * 32, "value": "0x0"},
}


def submitted_report(signer):
    (payload,) = signer.payloads
    return decode_action(ActionKind.GENERIC_CALL_REPORT, payload)


class TestBuildQuoteRequest:
    """Tests for the quote request."""

    def test_query_parameters(self):
        request = build_quote_request(make_lifi_config())
        parts = urlsplit(request.url)
        params = parse_qs(parts.query)

        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://li.quest/v1/quote"
        assert request.method == "GET"
        assert params["fromChain"] == ["42161"]
        assert params["toChain"] == ["42161"]
        assert params["fromToken"] == [USDC]
        assert params["toToken"] == [WETH]
        assert params["fromAmount"] == ["1000000"]
        assert params["fromAddress"] == [WALLET]
        assert params["slippage"] == ["0.01"]
        assert params["integrator"] == ["flowforge-cre-template"]

    def test_default_slippage(self):
        config = make_lifi_config()
        config.input_config.slippage_tolerance = None
        params = parse_qs(urlsplit(build_quote_request(config).url).query)
        assert params["slippage"] == ["0.005"]


class TestRunLifiSwap:
    """Tests for run_lifi_swap."""

    def test_successful_swap(self, http, signer, writer, capabilities):
        http.body = json.dumps(QUOTE).encode()

        result = run_lifi_swap(make_lifi_config(), capabilities)

        assert result.success
        assert result.amount_in == "1000000"
        assert result.amount_out == "300000000000000"

        report = submitted_report(signer)
        assert report.target == LIFI_DIAMOND
        assert report.call_data.hex().startswith("4630a0d8")
        assert report.value == 0
        assert report.token_in == USDC
        assert report.amount_in == 1_000_000
        assert report.recipient == WALLET
        assert writer.writes[0][0] == LIFI_RECEIVER
        assert writer.writes[0][2] == 1500000

    def test_native_source_maps_to_zero_address(self, http, signer, capabilities):
        tx_request = {**QUOTE["transactionRequest"], "value": "0x2386f26fc10000"}
        quote = {**QUOTE, "transactionRequest": tx_request}
        http.body = json.dumps(quote).encode()

        run_lifi_swap(make_lifi_config(source=NATIVE_TOKEN_PLACEHOLDER), capabilities)

        report = submitted_report(signer)
        assert report.token_in == ZERO_ADDRESS
        assert report.value == 10**16

    def test_missing_transaction_request(self, http, writer, capabilities):
        http.body = json.dumps({"message": "No available quotes"}).encode()

        result = run_lifi_swap(make_lifi_config(), capabilities)

        assert not result.success
        assert result.error_kind is ErrorKind.INVALID_COLLABORATOR_RESPONSE
        assert "transactionRequest" in result.error
        assert writer.writes == []

    def test_malformed_target(self, http, writer, capabilities):
        quote = {"transactionRequest": {**QUOTE["transactionRequest"], "to": "0xnot-an-address"}}
        http.body = json.dumps(quote).encode()

        result = run_lifi_swap(make_lifi_config(), capabilities)

        assert not result.success
        assert result.error_kind is ErrorKind.INVALID_COLLABORATOR_RESPONSE
        assert "malformed" in result.error
        assert writer.writes == []

    def test_malformed_data_and_value(self, http, capabilities):
        for field, bad in (("data", "0xzz"), ("value", "ten")):
            quote = {"transactionRequest": {**QUOTE["transactionRequest"], field: bad}}
            http.body = json.dumps(quote).encode()

            result = run_lifi_swap(make_lifi_config(), capabilities)

            assert result.error_kind is ErrorKind.INVALID_COLLABORATOR_RESPONSE, field

    def test_non_json_quote(self, http, capabilities):
        http.body = b"<html>502 Bad Gateway</html>"
        result = run_lifi_swap(make_lifi_config(), capabilities)
        assert result.error.startswith("Failed to fetch quote")

    def test_missing_receiver(self, http, capabilities):
        result = run_lifi_swap(make_lifi_config(swapReceiverAddress=""), capabilities)
        assert "swapReceiverAddress" in result.error
        assert http.requests == []

    def test_missing_estimate_reports_zero_out(self, http, capabilities):
        http.body = json.dumps({"transactionRequest": QUOTE["transactionRequest"]}).encode()
        result = run_lifi_swap(make_lifi_config(), capabilities)
        assert result.amount_out == "0"

    def test_explorer_link(self):
        assert explorer_link("ARBITRUM", "0xabc") == "https://arbiscan.io/tx/0xabc"
        assert explorer_link("ARBITRUM_SEPOLIA", "0xabc") == "https://sepolia.arbiscan.io/tx/0xabc"
