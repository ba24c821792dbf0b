"""Tests for pt-BR amount parsing and BRL formatting."""
import math

import pytest

from utils.common import (
    to_amount,
    value_or_zero,
    parse_currency_input,
    format_currency_input,
    format_brl,
    format_brl_abbr,
    format_percent,
)


class TestParseCurrencyInput:
    @pytest.mark.parametrize("raw, expected", [
        ("47.895,31", 47895.31),
        ("100.000", 100000.0),
        ("R$ 1.200", 1200.0),
        ("1.234.567,89", 1234567.89),
        ("0,5", 0.5),
        ("  250 ", 250.0),
        ("1,5,3", 1.53),
    ])
    def test_pt_br_notation(self, raw, expected):
        assert parse_currency_input(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["", "abc", "R$", ",", None])
    def test_unparseable_is_zero(self, raw):
        assert parse_currency_input(raw) == 0.0

    def test_numbers_pass_through(self):
        assert parse_currency_input(1500) == 1500.0
        assert parse_currency_input(12.5) == 12.5

    def test_negative_sign_is_dropped(self):
        assert parse_currency_input("-1.000") == 1000.0


class TestFormatCurrencyInput:
    def test_zero_is_blank(self):
        assert format_currency_input(0) == ""
        assert format_currency_input(None) == ""

    def test_thousands_and_decimals(self):
        assert format_currency_input(47895.31) == "47.895,31"
        assert format_currency_input(100000) == "100.000"
        assert format_currency_input(1234.5) == "1.234,5"

    @pytest.mark.parametrize("amount", [47895.31, 100000.0, 1234.5, 0.75, 2219500.0])
    def test_parses_back_to_the_same_amount(self, amount):
        assert parse_currency_input(format_currency_input(amount)) == pytest.approx(amount)


class TestAmounts:
    def test_to_amount_rejects_unusable_values(self):
        assert to_amount("12.5") == 12.5
        assert to_amount(True) == 0.0
        assert to_amount(float("nan")) == 0.0
        assert to_amount(math.inf) == 0.0
        assert to_amount({}) == 0.0

    def test_value_or_zero_on_sparse_maps(self):
        history = {2021: 10.0, 2023: None}
        assert value_or_zero(history, 2021) == 10.0
        assert value_or_zero(history, 2022) == 0.0
        assert value_or_zero(history, 2023) == 0.0
        assert value_or_zero(None, 2021) == 0.0


class TestDisplayFormatting:
    def test_format_brl(self):
        assert format_brl(1234567) == "R$ 1.234.567"
        assert format_brl(47895.31, 2) == "R$ 47.895,31"
        assert format_brl(-500) == "-R$ 500"

    def test_format_brl_abbr(self):
        assert format_brl_abbr(2_180_000) == "R$ 2.2M"
        assert format_brl_abbr(150_000) == "R$ 150k"
        assert format_brl_abbr(900) == "R$ 900"

    def test_format_percent(self):
        assert format_percent(84.2105) == "84.2%"
        assert format_percent(100, 0) == "100%"
