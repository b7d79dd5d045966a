import pytest

from chainscan.validation.address import (
    is_valid_bittensor_address,
    is_valid_osmosis_address,
    is_valid_polkadot_address,
    is_valid_ronin_address,
    same_substrate_account,
    ss58_decode,
    to_evm_address,
    to_ronin_address,
)
from tests.conftest import DOT_ADDRESS, DOT_KEY, TAO_ADDRESS, TAO_KEY, ss58_encode

ALICE_GENERIC = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"
ALICE_POLKADOT = ss58_encode(bytes.fromhex("d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d"), 0)


class TestSS58:
    def test_decode(self):
        prefix, key = ss58_decode(DOT_ADDRESS)
        assert prefix == 0
        assert key == DOT_KEY

    def test_bad_checksum(self):
        with pytest.raises(ValueError):
            ss58_decode(ALICE_GENERIC[:-1] + "Z")

    def test_bad_base58(self):
        with pytest.raises(ValueError):
            ss58_decode("0OIl" * 12)

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            ss58_decode("5Grwva")


class TestPolkadot:
    def test_valid(self):
        assert is_valid_polkadot_address(DOT_ADDRESS)
        assert is_valid_polkadot_address(ALICE_POLKADOT)

    def test_generic_substrate_accepted(self):
        assert is_valid_polkadot_address(ALICE_GENERIC)

    def test_other_network_rejected(self):
        kusama = ss58_encode(DOT_KEY, 2)
        assert not is_valid_polkadot_address(kusama)

    def test_garbage(self):
        assert not is_valid_polkadot_address("")
        assert not is_valid_polkadot_address("not-an-address")
        assert not is_valid_polkadot_address(ALICE_GENERIC[:-1] + "Z")


class TestBittensor:
    def test_valid(self):
        assert is_valid_bittensor_address(ALICE_GENERIC)
        assert is_valid_bittensor_address(TAO_ADDRESS)

    def test_polkadot_prefix_rejected(self):
        assert not is_valid_bittensor_address(ALICE_POLKADOT)


class TestOsmosis:
    def test_valid(self):
        assert is_valid_osmosis_address("osmo1" + "q" * 38)

    def test_wrong_length(self):
        assert not is_valid_osmosis_address("osmo1" + "q" * 37)

    def test_wrong_prefix(self):
        assert not is_valid_osmosis_address("cosmos1" + "q" * 38)

    def test_uppercase_rejected(self):
        assert not is_valid_osmosis_address("osmo1" + "Q" * 38)


class TestRonin:
    def test_hex(self):
        assert is_valid_ronin_address("0x" + "aB" * 20)

    def test_ronin_prefix(self):
        assert is_valid_ronin_address("ronin:" + "ab" * 20)

    def test_invalid(self):
        assert not is_valid_ronin_address("0x" + "ab" * 19)
        assert not is_valid_ronin_address("ronin:0x" + "ab" * 20)
        assert not is_valid_ronin_address("0x" + "zz" * 20)

    def test_conversions(self):
        assert to_evm_address("ronin:" + "AB" * 20) == "0x" + "ab" * 20
        assert to_ronin_address("0x" + "AB" * 20) == "ronin:" + "ab" * 20
        assert to_ronin_address(None) == ""


class TestSameSubstrateAccount:
    def test_same_key_different_prefix(self):
        assert same_substrate_account(DOT_ADDRESS, ss58_encode(DOT_KEY, 42))

    def test_hex_key(self):
        assert same_substrate_account("0x" + TAO_KEY.hex(), TAO_ADDRESS)

    def test_different_accounts(self):
        assert not same_substrate_account(DOT_ADDRESS, TAO_ADDRESS)

    def test_missing(self):
        assert not same_substrate_account(None, DOT_ADDRESS)
        assert not same_substrate_account(DOT_ADDRESS, "")


def test_alice_key_roundtrip():
    assert ss58_decode(ALICE_GENERIC) == (42, ss58_decode(ALICE_POLKADOT)[1])
