"""Tests for CEX/DEX classification and DEX display-name cleaning."""

from tokenarb.services.exchange_classifier import (
    classify, clean_display_name, display_name, venue_type,
)

from sample_data import ADDRESS


class TestClassify:
    """Keyword based DEX detection."""

    def test_dex_with_address(self):
        assert classify("Uniswap V3 0xABCDEF") is True

    def test_centralized_exchange(self):
        assert classify("Binance") is False
        assert classify("Coinbase Exchange") is False
        assert classify("Kraken") is False

    def test_case_insensitive(self):
        assert classify("PANCAKESWAP (v2)") is True
        assert classify("sushiswap") is True

    def test_substring_without_word_boundary(self):
        assert classify("Superswapper") is True

    def test_network_name_marks_dex(self):
        assert classify("Some AMM (Arbitrum)") is True

    def test_empty_and_none(self):
        assert classify("") is False
        assert classify(None) is False

    def test_venue_type(self):
        assert venue_type("Curve (Ethereum)") == "DEX"
        assert venue_type("Bitvavo") == "CEX"


class TestCleanDisplayName:
    """Stripping of addresses, tags and filler words."""

    def test_strips_version_pool_and_address(self):
        assert clean_display_name(f"Uniswap (V3) Pool {ADDRESS}") == "Uniswap"

    def test_short_result_falls_back_to_original(self):
        assert clean_display_name("V3") == "V3"

    def test_everything_stripped_falls_back(self):
        assert clean_display_name("(V2) Pool") == "(V2) Pool"

    def test_strips_network_annotation_and_trailing_separators(self):
        assert clean_display_name("PancakeSwap (BSC) - ") == "PancakeSwap"
        assert clean_display_name("Curve (Ethereum) Exchange") == "Curve"
        assert clean_display_name("Aerodrome (Base) Version.") == "Aerodrome"

    def test_unparenthesized_version_kept(self):
        assert clean_display_name(f"Uniswap V3 {ADDRESS}") == "Uniswap V3"

    def test_empty_and_none(self):
        assert clean_display_name("") == ""
        assert clean_display_name(None) == ""

    def test_display_name_leaves_cex_untouched(self):
        assert display_name("Binance Exchange") == "Binance Exchange"
        assert display_name(f"Uniswap (V2) {ADDRESS}") == "Uniswap"
        assert display_name(None) == ""
