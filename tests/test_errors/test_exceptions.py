"""Tests for the exception hierarchy and error classification."""

import httpx
import pytest

from crptapi.errors.classify import classify_status, classify_transport_error
from crptapi.errors.exceptions import (
    CrptApiError,
    LimiterShutdownError,
    RejectedResponse,
    SerializationError,
    TransportError,
)

_REQUEST = httpx.Request("POST", "https://ismp.crpt.ru/api/v3/lk/documents/create")


class TestExceptionHierarchy:
    def test_all_inherit_from_base(self):
        assert issubclass(SerializationError, CrptApiError)
        assert issubclass(TransportError, CrptApiError)
        assert issubclass(RejectedResponse, CrptApiError)
        assert issubclass(LimiterShutdownError, CrptApiError)

    def test_all_inherit_from_exception(self):
        assert issubclass(CrptApiError, Exception)

    def test_base_takes_only_message(self):
        err = CrptApiError("failed")
        assert err.message == "failed"
        with pytest.raises(TypeError):
            CrptApiError("failed", status=500)


class TestRejectedResponse:
    def test_attributes(self):
        err = RejectedResponse(status_code=503, body="rate limited")
        assert err.status_code == 503
        assert err.body == "rate limited"
        assert "503" in str(err)


class TestTransportError:
    def test_defaults(self):
        err = TransportError("boom")
        assert err.error_type == "connection"
        assert err.original is None
        assert err.message == "boom"


class TestClassifyTransportError:
    def test_connect_error(self):
        err = classify_transport_error(httpx.ConnectError("refused", request=_REQUEST))
        assert err.error_type == "connection"

    def test_connect_timeout_is_timeout(self):
        err = classify_transport_error(httpx.ConnectTimeout("slow", request=_REQUEST))
        assert err.error_type == "timeout"

    def test_read_error(self):
        err = classify_transport_error(httpx.ReadError("reset", request=_REQUEST))
        assert err.error_type == "network"

    def test_protocol_error(self):
        err = classify_transport_error(httpx.RemoteProtocolError("bad", request=_REQUEST))
        assert err.error_type == "protocol"
        assert isinstance(err.original, httpx.RemoteProtocolError)

    def test_decoding_error(self):
        err = classify_transport_error(httpx.DecodingError("bad gzip", request=_REQUEST))
        assert err.error_type == "protocol"

    def test_too_many_redirects(self):
        err = classify_transport_error(httpx.TooManyRedirects("loop", request=_REQUEST))
        assert err.error_type == "protocol"


class TestClassifyStatus:
    def test_200_is_success(self):
        assert classify_status(200, "ok") is None

    def test_other_status_rejected(self):
        err = classify_status(429, "slow down")
        assert isinstance(err, RejectedResponse)
        assert err.status_code == 429
        assert err.body == "slow down"
