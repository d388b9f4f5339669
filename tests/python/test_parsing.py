"""Tests for bucket and quantile parsing."""

import logging
import os
import sys
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../../python'))

from loadtest_collectors.collector import (
    DEFAULT_BUCKET_SIZES,
    DEFAULT_QUANTILES,
    DEFAULT_QUANTILES_STRING,
    QuantileDefinition,
    parse_buckets,
    parse_quantiles,
    quantiles_to_string,
)


class TestParseBuckets:
    """Test bucket list parsing."""

    def test_valid_list(self):
        """Test a fully valid list is returned as parsed, in order."""
        assert parse_buckets("100,200,300,400.3") == [100.0, 200.0, 300.0, 400.3]

    def test_unsorted_list_kept_as_is(self):
        """Test parsing does not sort boundaries."""
        assert parse_buckets("3,1,2") == [3.0, 1.0, 2.0]

    def test_invalid_tokens_dropped(self, caplog):
        """Test unparseable tokens are dropped with a warning."""
        with caplog.at_level(logging.WARNING, logger="loadtest.parsing"):
            buckets = parse_buckets("1,abc,2,,3", "my_metric")

        assert buckets == [1.0, 2.0, 3.0]
        assert "'abc'" in caplog.text
        assert "my_metric" in caplog.text

    @pytest.mark.parametrize("token", ["nan", "NaN", "1_000"])
    def test_nan_and_grouped_digits_dropped(self, token, caplog):
        """Test NaN and underscore-grouped tokens count as unparseable."""
        with caplog.at_level(logging.WARNING, logger="loadtest.parsing"):
            buckets = parse_buckets(f"1,{token},2", "my_metric")

        assert buckets == [1.0, 2.0]
        assert repr(token) in caplog.text

    def test_infinity_accepted(self):
        assert parse_buckets("1,inf") == [1.0, float("inf")]

    def test_whitespace_tolerated(self):
        """Test surrounding whitespace does not make a token invalid."""
        assert parse_buckets(" 1, 2 ,3") == [1.0, 2.0, 3.0]

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_returns_defaults(self, text):
        """Test empty input returns the default buckets."""
        assert parse_buckets(text) == [100.0, 500.0, 1000.0, 3000.0]

    def test_all_invalid_returns_defaults(self, caplog):
        """Test input with no valid token falls back to defaults."""
        with caplog.at_level(logging.WARNING, logger="loadtest.parsing"):
            buckets = parse_buckets("a,b,c", "my_metric")

        assert buckets == list(DEFAULT_BUCKET_SIZES)
        assert "Did not parse any buckets" in caplog.text

    def test_defaults_not_shared(self):
        """Test callers cannot mutate the default buckets."""
        buckets = parse_buckets("")
        buckets.append(1.0)

        assert parse_buckets("") == [100.0, 500.0, 1000.0, 3000.0]


class TestParseQuantiles:
    """Test quantile list parsing."""

    def test_valid_list(self):
        """Test a fully valid list is returned in order."""
        quantiles = parse_quantiles("0.999,0.1|0.99,0.2|0.75,0.3")

        assert quantiles == [
            QuantileDefinition(0.999, 0.1),
            QuantileDefinition(0.99, 0.2),
            QuantileDefinition(0.75, 0.3),
        ]

    def test_wrong_token_count_dropped(self, caplog):
        """Test definitions without exactly two parts are dropped."""
        with caplog.at_level(logging.WARNING, logger="loadtest.parsing"):
            quantiles = parse_quantiles("0.5|0.9,0.1|0.1,0.2,0.3", "my_summary")

        assert quantiles == [QuantileDefinition(0.9, 0.1)]
        assert "exactly 2 parameters" in caplog.text
        assert "my_summary" in caplog.text

    def test_nan_definition_dropped(self):
        quantiles = parse_quantiles("nan,0.1|0.5,nan|0.5,0.05")

        assert quantiles == [QuantileDefinition(0.5, 0.05)]

    def test_non_numeric_dropped(self):
        """Test non-numeric parts drop the whole definition."""
        quantiles = parse_quantiles("x,0.1|0.5,y|0.5,0.05")

        assert quantiles == [QuantileDefinition(0.5, 0.05)]

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_returns_defaults(self, text):
        """Test empty input returns the default quantiles."""
        assert parse_quantiles(text) == list(DEFAULT_QUANTILES)

    def test_all_invalid_returns_defaults(self, caplog):
        """Test input with no valid definition falls back to defaults."""
        with caplog.at_level(logging.WARNING, logger="loadtest.parsing"):
            quantiles = parse_quantiles("garbage|more,garbage")

        assert quantiles == list(DEFAULT_QUANTILES)
        assert "Did not parse any quantiles" in caplog.text


class TestQuantileDefinition:
    """Test QuantileDefinition value type."""

    def test_default_string(self):
        """Test default quantiles format to the documented string."""
        assert DEFAULT_QUANTILES_STRING == "0.75,0.5|0.95,0.1|0.99,0.01"

    def test_formatting(self):
        """Test formatting a list of definitions."""
        definitions = [QuantileDefinition(0.5, 0.05), QuantileDefinition(0.9, 0.01)]

        assert quantiles_to_string(definitions) == "0.5,0.05|0.9,0.01"

    def test_immutable(self):
        """Test definitions cannot be modified."""
        definition = QuantileDefinition(0.5, 0.05)

        with pytest.raises(AttributeError):
            definition.quantile = 0.9

    def test_from_tokens_rejects_wrong_count(self):
        """Test token pairs must have exactly two entries."""
        with pytest.raises(ValueError, match="exactly 2"):
            QuantileDefinition.from_tokens(["0.5"])


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
