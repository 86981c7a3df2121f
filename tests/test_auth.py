# -*- coding: utf-8 -*-
"""
Tests for request signing.
"""

import hashlib
import hmac
import pytest

from fapi_client.auth import ApiCredentials, RequestSigner, auth_headers
from fapi_client.errors import ConfigurationError, TimestampError
from fapi_client.models import OrderIntent, OrderSide, OrderType, TimeInForce
from fapi_client.params import ParameterSet, build_order_params

from conftest import FIXED_TIMESTAMP, TEST_API_KEY, TEST_API_SECRET


def limit_params() -> ParameterSet:
    return build_order_params(OrderIntent(
        symbol="BTCUSDT",
        side=OrderSide.BUY,
        order_type=OrderType.LIMIT,
        time_in_force=TimeInForce.GTC,
        quantity=1.5,
        price=20000.0,
    ))


class TestSignature:
    """Test HMAC generation."""

    def test_documented_signature_vector(self, signer):
        query = (
            "symbol=LTCBTC&side=BUY&type=LIMIT&timeInForce=GTC&quantity=1"
            "&price=0.1&recvWindow=5000&timestamp=1499827319559"
        )
        assert signer._generate_signature(query) == (
            "c8db56825ae71d6d79447849e617115f4a920fa2acdcab2b053c4b2838bd6b71"
        )

    def test_signature_covers_exact_query_string(self, signer):
        signed = signer.sign(limit_params())
        expected = hmac.new(
            TEST_API_SECRET.encode(), signed.query_string.encode(), hashlib.sha256
        ).hexdigest()
        assert signed.signature == expected

    def test_custom_digest(self, credentials):
        signer = RequestSigner(credentials, clock=lambda: 1, digestmod=hashlib.sha512)
        signed = signer.sign(ParameterSet())
        assert len(signed.signature) == 128


class TestSign:
    """Test timestamp, recvWindow and payload layout."""

    def test_payload_layout(self, signer):
        signed = signer.sign(limit_params())
        assert signed.query_string == (
            "price=20000&quantity=1.5&recvWindow=5000&side=BUY&symbol=BTCUSDT"
            f"&timeInForce=GTC&timestamp={FIXED_TIMESTAMP}&type=LIMIT"
        )
        assert signed.payload == f"{signed.query_string}&signature={signed.signature}"
        assert signed.payload.endswith(signed.signature)

    def test_deterministic(self, credentials):
        first = RequestSigner(credentials).sign(limit_params(), timestamp=FIXED_TIMESTAMP)
        second = RequestSigner(credentials).sign(limit_params(), timestamp=FIXED_TIMESTAMP)
        assert first.payload == second.payload
        assert first == second

    def test_insertion_order_does_not_matter(self, signer):
        a = signer.sign(ParameterSet({"symbol": "BTCUSDT", "orderId": "1"}))
        b = signer.sign(ParameterSet({"orderId": "1", "symbol": "BTCUSDT"}))
        assert a.payload == b.payload

    def test_explicit_timestamp_wins(self, signer):
        signed = signer.sign(ParameterSet(), timestamp=42)
        assert signed.params["timestamp"] == "42"

    def test_zero_recv_window_is_omitted(self, credentials):
        signer = RequestSigner(credentials, recv_window=0, clock=lambda: FIXED_TIMESTAMP)
        signed = signer.sign(ParameterSet({"symbol": "BTCUSDT"}))
        assert "recvWindow" not in signed.params
        assert signed.query_string == f"symbol=BTCUSDT&timestamp={FIXED_TIMESTAMP}"

    def test_values_are_percent_encoded(self, signer):
        signed = signer.sign(ParameterSet({"newClientOrderId": "a/b c"}), timestamp=1)
        assert "newClientOrderId=a%2Fb+c" in signed.query_string

    def test_input_params_untouched(self, signer):
        params = limit_params()
        signer.sign(params)
        assert "timestamp" not in params
        assert "signature" not in params


class TestSignerFailures:
    """Configuration and clock failures surface before any request."""

    def test_missing_secret(self):
        with pytest.raises(ConfigurationError):
            RequestSigner(ApiCredentials(api_key=TEST_API_KEY, api_secret=""))

    def test_negative_recv_window(self, credentials):
        with pytest.raises(ConfigurationError):
            RequestSigner(credentials, recv_window=-1)

    def test_clock_failure(self, credentials):
        def broken_clock():
            raise OSError("clock unavailable")

        signer = RequestSigner(credentials, clock=broken_clock)
        with pytest.raises(TimestampError):
            signer.sign(ParameterSet())

    def test_clock_before_epoch(self, credentials):
        signer = RequestSigner(credentials, clock=lambda: -5)
        with pytest.raises(TimestampError):
            signer.sign(ParameterSet())

    def test_clock_returning_none(self, credentials):
        signer = RequestSigner(credentials, clock=lambda: None)
        with pytest.raises(TimestampError):
            signer.sign(ParameterSet())


class TestAuthHeaders:
    def test_header_name(self, signer):
        assert signer.get_auth_headers() == {"X-MBX-APIKEY": TEST_API_KEY}

    @pytest.mark.parametrize("api_key", ["", "abc\r\nX-Injected: 1", "key\x00"])
    def test_invalid_header_value(self, api_key):
        with pytest.raises(ConfigurationError):
            auth_headers(api_key)

    def test_repr_hides_secret(self, credentials):
        assert TEST_API_SECRET not in repr(credentials)
