"""Tests for the file decoder."""
import base64

import pytest

from agents.auditor.models.schemas import ReadMode
from agents.auditor.services.decoder import read_file, strip_data_url_prefix, to_data_url
from shared.errors import FileReadError


class TestDataUrl:

    def test_to_data_url(self):
        assert to_data_url(b"hi", "application/pdf") == "data:application/pdf;base64,aGk="

    def test_to_data_url_without_mime(self):
        assert to_data_url(b"hi", "").startswith("data:application/octet-stream;base64,")

    def test_strip_prefix_up_to_first_comma(self):
        assert strip_data_url_prefix("data:application/pdf;base64,QUJD") == "QUJD"

    def test_strip_prefix_no_comma(self):
        assert strip_data_url_prefix("QUJD") == "QUJD"


class TestReadFile:

    @pytest.mark.asyncio
    async def test_text_mode(self, upload):
        payload = await read_file(upload("A.sol", b"contract A {}", "text/plain"), ReadMode.TEXT)
        assert payload.data == "contract A {}"
        assert payload.mime_type == "text/plain"
        assert payload.mode == ReadMode.TEXT

    @pytest.mark.asyncio
    async def test_text_mode_strips_bom(self, upload):
        payload = await read_file(upload("A.sol", b"\xef\xbb\xbfpragma solidity ^0.8.0;"), ReadMode.TEXT)
        assert payload.data == "pragma solidity ^0.8.0;"

    @pytest.mark.asyncio
    async def test_text_mode_replaces_invalid_bytes(self, upload):
        payload = await read_file(upload("A.sol", b"ok\xff"), ReadMode.TEXT)
        assert payload.data == "ok\ufffd"

    @pytest.mark.asyncio
    async def test_base64_mode(self, upload):
        raw = b"%PDF-1.7 binary \x00\x01"
        payload = await read_file(upload("paper.pdf", raw, "application/pdf"), ReadMode.BASE64)
        assert payload.data == base64.b64encode(raw).decode("ascii")
        assert not payload.data.startswith("data:")

    @pytest.mark.asyncio
    async def test_read_failure(self, upload):
        broken = upload("A.sol", b"contract A {}")
        broken.file.close()
        with pytest.raises(FileReadError, match="A.sol"):
            await read_file(broken, ReadMode.TEXT)
