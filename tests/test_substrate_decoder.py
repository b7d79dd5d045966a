from datetime import datetime, timezone

from chainscan.decoders.substrate_decoder import decode_subscan_transfer, decode_taostats_transfer
from tests.conftest import (
    DOT_ADDRESS,
    DOT_KEY,
    DOT_OTHER,
    TAO_ADDRESS,
    TAO_KEY,
    TAO_OTHER,
    ss58_encode,
    subscan_transfer,
    taostats_transfer,
)


class TestSubscanTransfer:
    def test_incoming(self):
        events = decode_subscan_transfer(subscan_transfer("0xaaa", incoming=True), DOT_ADDRESS)
        assert len(events) == 1
        ev = events[0]
        assert ev.received_quantity == "1.5"
        assert ev.received_currency == "DOT"
        assert ev.sent_quantity is None
        assert ev.fee_amount is None
        assert ev.notes == f"Received from {DOT_OTHER[:8]}..."
        assert ev.chain == "Polkadot"
        assert ev.protocol == "balances"
        assert ev.block_height == 19000000
        assert ev.explorer_url == "https://polkadot.subscan.io/extrinsic/0xaaa"
        assert ev.timestamp == datetime(2024, 1, 25, 0, 0, 0, tzinfo=timezone.utc)

    def test_outgoing_carries_fee(self):
        ev = decode_subscan_transfer(subscan_transfer("0xbbb", incoming=False), DOT_ADDRESS)[0]
        assert ev.sent_quantity == "1.5"
        assert ev.sent_currency == "DOT"
        assert ev.fee_amount == "0.016"
        assert ev.fee_currency == "DOT"
        assert ev.notes == f"Sent to {DOT_OTHER[:8]}..."

    def test_zero_fee_left_empty(self):
        ev = decode_subscan_transfer(subscan_transfer("0xbbb", incoming=False, fee="0"), DOT_ADDRESS)[0]
        assert ev.fee_amount is None
        assert ev.fee_currency is None

    def test_direction_matches_by_public_key(self):
        generic = ss58_encode(DOT_KEY, 42)
        ev = decode_subscan_transfer(subscan_transfer("0xccc", incoming=True), generic)[0]
        assert ev.is_incoming

    def test_amount_v2_preferred(self):
        ev = decode_subscan_transfer(subscan_transfer("0xddd", amount_v2="12345678900"), DOT_ADDRESS)[0]
        assert ev.received_quantity == "1.23456789"

    def test_display_amount_fallback(self):
        raw = subscan_transfer("0xeee")
        raw.pop("amount_v2")
        raw["amount"] = "2.50"
        ev = decode_subscan_transfer(raw, DOT_ADDRESS)[0]
        assert ev.received_quantity == "2.5"

    def test_failed_transfer_skipped(self):
        raw = subscan_transfer("0xfff")
        raw["success"] = False
        assert decode_subscan_transfer(raw, DOT_ADDRESS) == []

    def test_missing_hash_skipped(self):
        raw = subscan_transfer("")
        assert decode_subscan_transfer(raw, DOT_ADDRESS) == []

    def test_missing_timestamp_skipped(self):
        raw = subscan_transfer("0x111")
        raw.pop("block_timestamp")
        assert decode_subscan_transfer(raw, DOT_ADDRESS) == []

    def test_not_an_object(self):
        assert decode_subscan_transfer("garbage", DOT_ADDRESS) == []
        assert decode_subscan_transfer(None, DOT_ADDRESS) == []


class TestTaostatsTransfer:
    def test_incoming(self):
        ev = decode_taostats_transfer(taostats_transfer("0xabc", incoming=True), TAO_ADDRESS)[0]
        assert ev.received_quantity == "2.5"
        assert ev.received_currency == "TAO"
        assert ev.fee_amount is None
        assert ev.from_address == TAO_OTHER
        assert ev.chain == "Bittensor"
        assert ev.explorer_url == "https://taostats.io/extrinsic/0xabc"

    def test_outgoing_carries_fee(self):
        ev = decode_taostats_transfer(taostats_transfer("0xabc", incoming=False), TAO_ADDRESS)[0]
        assert ev.sent_quantity == "2.5"
        assert ev.fee_amount == "0.000125"
        assert ev.fee_currency == "TAO"
        assert ev.notes == f"Sent to {TAO_OTHER[:8]}..."

    def test_incoming_by_hex_key_only(self):
        raw = taostats_transfer("0xabc", incoming=True)
        raw["to"] = {"hex": "0x" + TAO_KEY.hex()}
        ev = decode_taostats_transfer(raw, TAO_ADDRESS)[0]
        assert ev.is_incoming

    def test_bare_string_accounts(self):
        raw = taostats_transfer("0xabc", incoming=True)
        raw["from"] = TAO_OTHER
        raw["to"] = TAO_ADDRESS
        ev = decode_taostats_transfer(raw, TAO_ADDRESS)[0]
        assert ev.is_incoming
        assert ev.from_address == TAO_OTHER

    def test_extrinsic_id_as_identity(self):
        raw = taostats_transfer(None)
        ev = decode_taostats_transfer(raw, TAO_ADDRESS)[0]
        assert ev.tx_hash == "2000000-0004"

    def test_missing_identity_skipped(self):
        raw = taostats_transfer(None)
        raw["extrinsic_id"] = None
        assert decode_taostats_transfer(raw, TAO_ADDRESS) == []

    def test_unparsable_amount_skipped(self):
        raw = taostats_transfer("0xabc", amount="lots")
        assert decode_taostats_transfer(raw, TAO_ADDRESS) == []
