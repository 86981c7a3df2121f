# -*- coding: utf-8 -*-
"""
Tests for response classification and typed response decoding.
"""

import sys
import pytest

from fapi_client.classifier import (
    classify_error,
    classify_response,
    decode_list,
    expect_empty,
    positional_field,
)
from fapi_client.codec import parse_float
from fapi_client.errors import BusinessError, DecodeError, FieldMissingError
from fapi_client.models import (
    AccountBalance,
    CanceledOrder,
    ChangeLeverageResponse,
    KlineSummary,
    MarkPrice,
    Order,
    Position,
    ServerTime,
    Transaction,
)

from conftest import as_body

KLINE_ROW = [
    1499040000000, "0.01634790", "0.80000000", "0.01575800", "0.01577100",
    "148976.11427815", 1499644799999, "2434.19055334", 308,
    "1756.87402397", "28.46694368", "0",
]


class TestBusinessErrors:
    """Test the {code, msg} error envelope."""

    def test_insufficient_balance(self):
        body = b'{"code": -2010, "msg": "Account has insufficient balance"}'
        with pytest.raises(BusinessError) as exc_info:
            classify_response(400, body, Transaction.from_wire)
        assert exc_info.value.code == -2010
        assert exc_info.value.msg == "Account has insufficient balance"
        assert exc_info.value.status_code == 400

    def test_server_side_business_error(self):
        body = b'{"code": -1001, "msg": "Internal error; unable to process your request."}'
        with pytest.raises(BusinessError) as exc_info:
            classify_response(503, body, expect_empty)
        assert exc_info.value.code == -1001

    @pytest.mark.parametrize("body", [
        b"<html>502 Bad Gateway</html>",
        b"",
        b'["code", -1]',
        b'{"msg": "no code"}',
        b'{"code": "-2010", "msg": "code as string"}',
        b'{"code": -2010}',
        b'{"code": true, "msg": "bool code"}',
        b'{"code": 70000, "msg": "out of range"}',
    ])
    def test_unparseable_error_is_decode_error(self, body):
        with pytest.raises(DecodeError) as exc_info:
            classify_response(502, body, expect_empty)
        assert exc_info.value.status_code == 502
        assert exc_info.value.body == body


class TestSuccessDecoding:
    """Test success bodies against their schema."""

    def test_transaction(self, transaction_response_data):
        result = classify_response(200, as_body(transaction_response_data), Transaction.from_wire)
        assert result.order_id == 22542179
        assert result.stop_price == 9300.0
        assert result.activate_price == 9020.0
        assert result.price_rate == 0.3
        assert result.order_type == "TRAILING_STOP_MARKET"

    def test_transaction_optional_fields_absent(self, transaction_response_data):
        del transaction_response_data["activatePrice"]
        del transaction_response_data["priceRate"]
        result = classify_response(200, as_body(transaction_response_data), Transaction.from_wire)
        assert result.activate_price is None
        assert result.price_rate is None

    def test_transaction_requires_stop_price(self, transaction_response_data):
        del transaction_response_data["stopPrice"]
        body = as_body(transaction_response_data)
        with pytest.raises(DecodeError, match="stopPrice") as exc_info:
            classify_response(200, body, Transaction.from_wire)
        assert exc_info.value.status_code == 200
        assert exc_info.value.body == body

    def test_order_defaults_absent_prices_to_zero(self, order_response_data):
        result = classify_response(200, as_body(order_response_data), Order.from_wire)
        assert result.stop_price == 0.0
        assert result.activation_price == 0.0
        assert result.price_rate == 0.0
        assert result.cum_qty == 0.0
        assert result.price == 20000.0

    def test_order_does_not_default_other_fields(self, order_response_data):
        del order_response_data["avgPrice"]
        with pytest.raises(DecodeError, match="avgPrice"):
            classify_response(200, as_body(order_response_data), Order.from_wire)

    def test_canceled_order(self, transaction_response_data):
        data = dict(transaction_response_data, status="CANCELED", price="9000")
        result = classify_response(200, as_body(data), CanceledOrder.from_wire)
        assert result.status == "CANCELED"
        assert result.price == 9000.0

    def test_invalid_json_on_success(self):
        with pytest.raises(DecodeError) as exc_info:
            classify_response(200, b"not json", expect_empty)
        assert exc_info.value.body == b"not json"

    def test_numbers_as_strings_or_native(self):
        as_string = {"leverage": 20, "maxNotionalValue": "1000000", "symbol": "BTCUSDT"}
        as_number = {"leverage": 20, "maxNotionalValue": 1000000, "symbol": "BTCUSDT"}
        assert (
            classify_response(200, as_body(as_string), ChangeLeverageResponse.from_wire)
            == classify_response(200, as_body(as_number), ChangeLeverageResponse.from_wire)
        )

    def test_list_response(self):
        balances = [{
            "accountAlias": "SgsR",
            "asset": "USDT",
            "balance": "122607.35137903",
            "crossWalletBalance": "23.72469206",
            "crossUnPnl": "0.00000000",
            "availableBalance": "23.72469206",
            "maxWithdrawAmount": "23.72469206",
            "marginAvailable": True,
            "updateTime": 1617939110373,
        }]
        result = classify_response(200, as_body(balances), decode_list(AccountBalance.from_wire))
        assert result[0].cross_unrealized_pnl == 0.0
        assert result[0].margin_available is True

    def test_list_expected_but_object_received(self):
        with pytest.raises(DecodeError):
            classify_response(200, b"{}", decode_list(Position.from_wire))

    def test_position_string_bool(self):
        data = [{
            "entryPrice": "0.00000",
            "marginType": "isolated",
            "isAutoAddMargin": "false",
            "isolatedMargin": "0.00000000",
            "leverage": "10",
            "liquidationPrice": "0",
            "markPrice": "6679.50671178",
            "maxNotionalValue": "20000000",
            "positionAmt": "0.000",
            "symbol": "BTCUSDT",
            "unRealizedProfit": "0.00000000",
            "positionSide": "BOTH",
        }]
        result = classify_response(200, as_body(data), decode_list(Position.from_wire))
        assert result[0].is_auto_add_margin is False
        assert result[0].leverage == "10"

    def test_empty_object(self):
        assert classify_response(200, b"{}", expect_empty) is None
        assert classify_response(200, b'{"code": 200, "msg": "success"}', expect_empty) is None


class TestOversizedNumbers:
    """Numbers past float or int limits are DecodeError, not raw exceptions."""

    @staticmethod
    def mark_price_body(mark_price: bytes) -> bytes:
        return (
            b'{"symbol": "BTCUSDT", "markPrice": ' + mark_price
            + b', "lastFundingRate": "0", "nextFundingTime": 1, "time": 1}'
        )

    def test_integer_too_large_for_float(self):
        body = self.mark_price_body(b"9" * 400)
        with pytest.raises(DecodeError, match="markPrice") as exc_info:
            classify_response(200, body, MarkPrice.from_wire)
        assert exc_info.value.status_code == 200
        assert exc_info.value.body == body

    def test_float_literal_overflowing_to_inf(self):
        with pytest.raises(DecodeError, match="markPrice"):
            classify_response(200, self.mark_price_body(b"1e400"), MarkPrice.from_wire)

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"), reason="no integer digit limit"
    )
    def test_integer_past_digit_limit(self):
        digits = b"1" * (sys.get_int_max_str_digits() + 1)
        body = b'{"serverTime": ' + digits + b"}"
        with pytest.raises(DecodeError) as exc_info:
            classify_response(200, body, ServerTime.from_wire)
        assert exc_info.value.body == body

    def test_error_envelope_with_huge_code(self):
        body = b'{"code": -' + b"1" * 5000 + b', "msg": "x"}'
        error = classify_error(400, body)
        assert isinstance(error, DecodeError)
        assert error.status_code == 400


class TestPositionalArrays:
    """Test kline-style positional decoding."""

    def test_full_row(self):
        kline = KlineSummary.from_row(KLINE_ROW)
        assert kline.open_time == 1499040000000
        assert kline.close == 0.015771
        assert kline.number_of_trades == 308

    def test_missing_close(self):
        with pytest.raises(FieldMissingError) as exc_info:
            KlineSummary.from_row(KLINE_ROW[:4])
        assert exc_info.value.index == 4
        assert exc_info.value.name == "close"
        assert str(exc_info.value) == "close at 4 is missing"

    def test_wrong_typed_index(self):
        row = list(KLINE_ROW)
        row[2] = {"unexpected": "object"}
        with pytest.raises(FieldMissingError) as exc_info:
            KlineSummary.from_row(row)
        assert exc_info.value.index == 2
        assert exc_info.value.name == "high"

    def test_null_value(self):
        with pytest.raises(FieldMissingError):
            positional_field([None], 0, "open_time", parse_float)

    def test_through_classifier(self):
        body = as_body([KLINE_ROW, KLINE_ROW[:5]])
        with pytest.raises(FieldMissingError) as exc_info:
            classify_response(200, body, decode_list(KlineSummary.from_row))
        assert exc_info.value.index == 5
        assert exc_info.value.name == "volume"
