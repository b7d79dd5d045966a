import pytest
from fastapi import HTTPException

from chainscan.models.chain import Chain
from chainscan.validation.input import validate_address, validate_chain, validate_format, validate_mode
from tests.conftest import DOT_ADDRESS, OSMO_ADDRESS, RONIN_ADDRESS, TAO_ADDRESS


class TestValidateChain:
    def test_valid_polkadot(self):
        assert validate_chain("polkadot") == Chain.POLKADOT

    def test_valid_ronin(self):
        assert validate_chain("ronin") == Chain.RONIN

    def test_case_insensitive(self):
        assert validate_chain("Bittensor") == Chain.BITTENSOR
        assert validate_chain("OSMOSIS") == Chain.OSMOSIS

    def test_strips_whitespace(self):
        assert validate_chain("  polkadot  ") == Chain.POLKADOT

    def test_invalid_chain(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_chain("ethereum")
        assert exc_info.value.status_code == 400
        assert "Unsupported chain" in exc_info.value.detail

    def test_empty_chain(self):
        with pytest.raises(HTTPException):
            validate_chain("")


class TestValidateAddress:
    def test_valid_per_chain(self):
        assert validate_address(Chain.POLKADOT, DOT_ADDRESS) == DOT_ADDRESS
        assert validate_address(Chain.BITTENSOR, TAO_ADDRESS) == TAO_ADDRESS
        assert validate_address(Chain.OSMOSIS, OSMO_ADDRESS) == OSMO_ADDRESS
        assert validate_address(Chain.RONIN, RONIN_ADDRESS) == RONIN_ADDRESS

    def test_strips_whitespace(self):
        assert validate_address(Chain.OSMOSIS, f"  {OSMO_ADDRESS} ") == OSMO_ADDRESS

    def test_missing(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_address(Chain.POLKADOT, "   ")
        assert exc_info.value.status_code == 400
        assert "Missing" in exc_info.value.detail

    def test_wrong_chain_format(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_address(Chain.RONIN, OSMO_ADDRESS)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Invalid Ronin address format"


class TestValidateOptions:
    def test_modes(self):
        assert validate_mode("strict") == "strict"
        assert validate_mode(" Enriched ") == "enriched"
        assert validate_mode("") == "strict"

    def test_bad_mode(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_mode("verbose")
        assert exc_info.value.status_code == 400

    def test_formats(self):
        assert validate_format("CSV") == "csv"
        assert validate_format(None) == "json"

    def test_bad_format(self):
        with pytest.raises(HTTPException):
            validate_format("xml")
