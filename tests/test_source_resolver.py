"""Tests for contract source resolution."""
from unittest.mock import AsyncMock, patch

import pytest

from agents.auditor.models.schemas import InputMode
from agents.auditor.services.source_resolver import is_valid_address, resolve_source
from shared.errors import InvalidInputError, UpstreamError

from conftest import VALID_ADDRESS

INVALID_ADDRESSES = [
    "",
    "0x",
    "0x123",
    "1111111111111111111111111111111111111111",
    "0x" + "1" * 39,
    "0x" + "1" * 41,
    "0x" + "g" * 40,
    " " + VALID_ADDRESS,
    VALID_ADDRESS + "\n",
    "0X" + "1" * 40,
]


class TestAddressValidation:

    @pytest.mark.parametrize("address", INVALID_ADDRESSES)
    def test_invalid(self, address):
        assert is_valid_address(address) is False

    def test_none(self):
        assert is_valid_address(None) is False

    def test_mixed_case_hex(self):
        assert is_valid_address("0xAbCdEf0123456789abcdef0123456789ABCDEF01")


class TestResolveAddress:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("address", INVALID_ADDRESSES + [None])
    @patch("agents.auditor.services.source_resolver.fetch_contract_source", new_callable=AsyncMock)
    async def test_invalid_address_makes_no_network_call(self, mock_fetch, address):
        with pytest.raises(InvalidInputError, match="valid Ethereum address"):
            await resolve_source(InputMode.ADDRESS, address=address)
        mock_fetch.assert_not_awaited()

    @pytest.mark.asyncio
    @patch("agents.auditor.services.source_resolver.fetch_contract_source", new_callable=AsyncMock)
    async def test_valid_address_fetches_source(self, mock_fetch):
        mock_fetch.return_value = "contract A{}"
        source = await resolve_source(InputMode.ADDRESS, address=VALID_ADDRESS)
        assert source == "contract A{}"
        mock_fetch.assert_awaited_once_with(VALID_ADDRESS)

    @pytest.mark.asyncio
    @patch("agents.auditor.services.source_resolver.fetch_contract_source", new_callable=AsyncMock)
    async def test_upstream_error_propagates(self, mock_fetch):
        mock_fetch.side_effect = UpstreamError("Etherscan API Error: rate limited")
        with pytest.raises(UpstreamError, match="rate limited"):
            await resolve_source(InputMode.ADDRESS, address=VALID_ADDRESS)


class TestResolveFile:

    @pytest.mark.asyncio
    async def test_missing_file(self):
        with pytest.raises(InvalidInputError, match="upload a contract file"):
            await resolve_source(InputMode.FILE)

    @pytest.mark.asyncio
    async def test_empty_selection(self, upload):
        with pytest.raises(InvalidInputError):
            await resolve_source(InputMode.FILE, upload=upload("", b""))

    @pytest.mark.asyncio
    @patch("agents.auditor.services.source_resolver.fetch_contract_source", new_callable=AsyncMock)
    async def test_reads_file_as_text(self, mock_fetch, upload):
        # Declared type is ignored for contract files
        source = await resolve_source(
            InputMode.FILE,
            address="not-used",
            upload=upload("Token.sol", b"contract Token {}", "application/octet-stream"),
        )
        assert source == "contract Token {}"
        mock_fetch.assert_not_awaited()
