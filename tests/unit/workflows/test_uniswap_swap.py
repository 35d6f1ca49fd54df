"""Tests for the Uniswap V4 swap workflow."""

from actionkit.capabilities import Capabilities
from actionkit.constants import MAX_SQRT_PRICE, MIN_SQRT_PRICE, Q96, ZERO_ADDRESS
from actionkit.encoding import ActionKind, decode_action
from actionkit.encoding.calls import GET_SLOT0_SELECTOR
from actionkit.errors import ErrorKind
from actionkit.settlement import TxOutcome, TxStatus
from actionkit.workflows import run_uniswap_swap
from actionkit.workflows.uniswap_swap import resolve_pool_key, state_view_for
from tests.helpers.constants import (
    NOW,
    POOL_MANAGER,
    STATE_VIEW,
    SWAP_RECEIVER,
    USDC_SEPOLIA,
    WALLET,
    WETH_SEPOLIA,
)
from tests.helpers.factories import make_swap_config, slot0_response


def submitted_report(signer):
    (payload,) = signer.payloads
    return decode_action(ActionKind.V4_SWAP_REPORT, payload)


class TestResolvePoolKey:
    """Tests for pool parameter resolution."""

    def test_defaults(self):
        key, zero_for_one = resolve_pool_key(make_swap_config())
        assert (key.fee, key.tick_spacing, key.hooks) == (3000, 60, ZERO_ADDRESS)
        assert zero_for_one is True

    def test_pool_config_wins_over_fee_tier(self):
        config = make_swap_config(poolConfig={"fee": 500, "tickSpacing": 10}, feeTier=10000)
        key, _ = resolve_pool_key(config)
        assert (key.fee, key.tick_spacing) == (500, 10)

    def test_deprecated_fee_tier(self):
        key, _ = resolve_pool_key(make_swap_config(feeTier=10000))
        assert key.fee == 10000

    def test_state_view_defaults_on_testnet_only(self):
        assert state_view_for(make_swap_config()) == STATE_VIEW
        assert state_view_for(make_swap_config(chain="ARBITRUM")) is None


class TestRunUniswapSwap:
    """Tests for run_uniswap_swap."""

    def test_successful_swap(self, reader, signer, writer, capabilities):
        """USDC -> WETH on Sepolia: zeroForOne, limit one below the pool price."""
        reader.add(STATE_VIEW, GET_SLOT0_SELECTOR, slot0_response(Q96))

        result = run_uniswap_swap(make_swap_config(), capabilities)

        assert result.success
        assert result.transaction_hash == "0x" + "ab" * 32
        assert result.amount_in == "1000000"
        assert result.amount_out == "1"

        report = submitted_report(signer)
        assert report.currency0 == USDC_SEPOLIA
        assert report.currency1 == WETH_SEPOLIA
        assert report.zero_for_one is True
        assert report.sqrt_price_limit_x96 == Q96 - 1
        assert report.recipient == WALLET
        assert report.pool_manager_address == POOL_MANAGER
        assert report.deadline == NOW + 1200

        receiver, _, gas_limit = writer.writes[0]
        assert receiver == SWAP_RECEIVER
        assert gas_limit == 500000

    def test_reverse_direction(self, reader, signer, capabilities):
        reader.add(STATE_VIEW, GET_SLOT0_SELECTOR, slot0_response(Q96))

        config = make_swap_config(source=WETH_SEPOLIA, destination=USDC_SEPOLIA)
        result = run_uniswap_swap(config, capabilities)

        assert result.success
        report = submitted_report(signer)
        assert report.zero_for_one is False
        assert report.currency0 == USDC_SEPOLIA
        assert report.sqrt_price_limit_x96 == Q96 + 1

    def test_explicit_deadline(self, reader, signer, capabilities):
        reader.add(STATE_VIEW, GET_SLOT0_SELECTOR, slot0_response(Q96))
        config = make_swap_config()
        config.input_config.deadline = 1_800_000_000

        run_uniswap_swap(config, capabilities)

        assert submitted_report(signer).deadline == 1_800_000_000

    def test_missing_amount_out_minimum_defaults_to_zero(self, reader, signer, capabilities):
        reader.add(STATE_VIEW, GET_SLOT0_SELECTOR, slot0_response(Q96))
        config = make_swap_config()
        config.input_config.amount_out_minimum = None

        result = run_uniswap_swap(config, capabilities)

        assert result.success
        assert submitted_report(signer).amount_out_min == 0

    def test_uninitialized_pool(self, reader, writer, capabilities):
        reader.add(STATE_VIEW, GET_SLOT0_SELECTOR, slot0_response(0))

        result = run_uniswap_swap(make_swap_config(), capabilities)

        assert not result.success
        assert result.error_kind is ErrorKind.POOL_UNINITIALIZED
        assert "create the pool first" in result.error
        assert writer.writes == []

    def test_price_at_bound(self, reader, capabilities):
        reader.add(STATE_VIEW, GET_SLOT0_SELECTOR, slot0_response(MAX_SQRT_PRICE - 1))
        config = make_swap_config(source=WETH_SEPOLIA, destination=USDC_SEPOLIA)

        result = run_uniswap_swap(config, capabilities)

        assert result.error_kind is ErrorKind.PRICE_AT_BOUND

    def test_fallback_limit_without_state_view(self, signer, capabilities):
        """Mainnet without a StateView address uses the permissive limit."""
        result = run_uniswap_swap(make_swap_config(chain="ARBITRUM"), capabilities)

        assert result.success
        assert submitted_report(signer).sqrt_price_limit_x96 == MIN_SQRT_PRICE + 1

    def test_missing_receiver(self, capabilities):
        result = run_uniswap_swap(make_swap_config(swapReceiverAddress=""), capabilities)
        assert not result.success
        assert result.error_kind is ErrorKind.MISSING_CONFIGURATION
        assert "swapReceiverAddress" in result.error

    def test_missing_pool_manager(self, capabilities):
        result = run_uniswap_swap(make_swap_config(poolManagerAddress=""), capabilities)
        assert "poolManagerAddress" in result.error

    def test_reverted_submission(self, reader, writer, capabilities):
        reader.add(STATE_VIEW, GET_SLOT0_SELECTOR, slot0_response(Q96))
        writer.outcome = TxOutcome(TxStatus.REVERTED, error_message="PriceLimitAlreadyExceeded")

        result = run_uniswap_swap(make_swap_config(), capabilities)

        assert not result.success
        assert result.error == "PriceLimitAlreadyExceeded"
        assert result.error_kind is ErrorKind.NON_SUCCESS_SETTLEMENT
        assert result.amount_in == "1000000"

    def test_reader_failure_becomes_result(self, capabilities):
        """A reverting state read is reported, not raised."""
        result = run_uniswap_swap(make_swap_config(), capabilities)
        assert not result.success
        assert "RuntimeError" in result.error

    def test_no_signer(self, reader):
        reader.add(STATE_VIEW, GET_SLOT0_SELECTOR, slot0_response(Q96))
        result = run_uniswap_swap(make_swap_config(), Capabilities(reader=reader))
        assert result.error_kind is ErrorKind.MISSING_CONFIGURATION
        assert "signer" in result.error
