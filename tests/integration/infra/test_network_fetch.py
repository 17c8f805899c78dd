from __future__ import annotations

"""
Integration tests for the archive fetch client (HTTP mocked).
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from archivetree.domain.errors import ArchiveFetchError
from archivetree.infra.network import fetch_archive_bytes
from archivetree.infra.network.common import USER_AGENT


def _response(chunks):
    response = MagicMock()
    response.iter_content.return_value = chunks
    return response


@patch("archivetree.infra.network.fetch_client.requests.get")
def test_fetch_concatenates_chunks(mock_get):
    mock_get.return_value.__enter__.return_value = _response([b"PK", b"", b"\x03\x04"])

    data = fetch_archive_bytes("https://storage.example/a.zip")

    assert data == b"PK\x03\x04"
    _, kwargs = mock_get.call_args
    assert kwargs["headers"]["User-Agent"] == USER_AGENT
    assert kwargs["stream"] is True


@patch("archivetree.infra.network.fetch_client.requests.get")
def test_http_error_is_wrapped(mock_get):
    response = _response([])
    response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Not Found")
    mock_get.return_value.__enter__.return_value = response

    with pytest.raises(ArchiveFetchError) as exc_info:
        fetch_archive_bytes("https://storage.example/missing.zip")

    assert isinstance(exc_info.value.__cause__, requests.exceptions.HTTPError)


@patch("archivetree.infra.network.fetch_client.requests.get")
def test_timeout_is_wrapped(mock_get):
    mock_get.side_effect = requests.exceptions.Timeout()

    with pytest.raises(ArchiveFetchError, match="Timed out"):
        fetch_archive_bytes("https://storage.example/slow.zip", timeout=1)


@patch("archivetree.infra.network.fetch_client.requests.get")
def test_size_limit(mock_get):
    mock_get.return_value.__enter__.return_value = _response([b"1234", b"5678"])

    with pytest.raises(ArchiveFetchError, match="byte limit"):
        fetch_archive_bytes("https://storage.example/big.zip", max_bytes=6)
