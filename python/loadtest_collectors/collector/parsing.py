"""
Parsers for the quantile-or-bucket text field.

Formats:
    buckets:   comma separated decimals, e.g. ``100,200,300,400.3``
    quantiles: ``|`` separated ``quantile,error`` pairs, e.g. ``0.999,0.1|0.99,0.2``

A token that does not parse is logged and skipped. When nothing parses the
built-in defaults are returned, so callers always get a non-empty result.
"""

import logging
from typing import List, Optional, Tuple

from .quantiles import (
    DEFAULT_QUANTILES,
    QUANTILE_DEFINITION_SEPARATOR,
    QUANTILE_ERROR_SEPARATOR,
    QuantileDefinition,
    parse_number,
)

logger = logging.getLogger("loadtest.parsing")

BUCKET_SEPARATOR = ","

DEFAULT_BUCKET_SIZES: Tuple[float, ...] = (100.0, 500.0, 1000.0, 3000.0)
DEFAULT_BUCKET_SIZES_STRING = "100,500,1000,3000"


def _parse_float(token: str) -> Tuple[Optional[float], Optional[Exception]]:
    """Parse one numeric token, returning (value, error)."""
    try:
        return parse_number(token), None
    except ValueError as e:
        return None, e


def parse_buckets(text: Optional[str], metric_name: str = "") -> List[float]:
    """
    Parse a bucket list.

    Args:
        text: Comma separated bucket boundaries
        metric_name: Owning metric, used in warnings

    Returns:
        Parsed boundaries in input order, or the defaults if none parsed
    """
    if not text:
        return list(DEFAULT_BUCKET_SIZES)

    buckets: List[float] = []
    for token in text.split(BUCKET_SEPARATOR):
        value, error = _parse_float(token)
        if error is not None:
            logger.warning(
                f"couldn't parse {token!r} because of error {type(error).__name__}: {error}. "
                f"It won't be included in buckets for the metric {metric_name}"
            )
            continue
        buckets.append(value)

    if not buckets:
        logger.warning(f"Did not parse any buckets for metric {metric_name}. Returning defaults")
        return list(DEFAULT_BUCKET_SIZES)

    return buckets


def parse_quantiles(text: Optional[str], metric_name: str = "") -> List[QuantileDefinition]:
    """
    Parse a quantile definition list.

    Args:
        text: ``|`` separated ``quantile,error`` pairs
        metric_name: Owning metric, used in warnings

    Returns:
        Parsed definitions in input order, or the defaults if none parsed
    """
    if not text:
        return list(DEFAULT_QUANTILES)

    quantiles: List[QuantileDefinition] = []
    for token in text.split(QUANTILE_DEFINITION_SEPARATOR):
        try:
            quantiles.append(QuantileDefinition.from_tokens(token.split(QUANTILE_ERROR_SEPARATOR)))
        except ValueError as e:
            logger.warning(
                f"couldn't parse {token!r} because of error {type(e).__name__}: {e}. "
                f"It won't be included in quantiles for the metric {metric_name}"
            )

    if not quantiles:
        logger.warning(f"Did not parse any quantiles for metric {metric_name}. Returning defaults")
        return list(DEFAULT_QUANTILES)

    return quantiles
