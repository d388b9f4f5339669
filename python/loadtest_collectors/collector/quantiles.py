"""Quantile definitions for summary collectors."""

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

QUANTILE_ERROR_SEPARATOR = ","
QUANTILE_DEFINITION_SEPARATOR = "|"


def parse_number(token: str) -> float:
    """
    Parse a decimal token.

    NaN and underscore digit grouping are rejected; infinities are allowed.

    Raises:
        ValueError: If the token is not a usable number
    """
    if "_" in token:
        raise ValueError(f"could not convert string to float: {token!r}")
    value = float(token)
    if math.isnan(value):
        raise ValueError(f"NaN is not a valid number: {token!r}")
    return value


@dataclass(frozen=True)
class QuantileDefinition:
    """Target quantile and the error tolerated when estimating it."""
    quantile: float
    error: float

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "QuantileDefinition":
        """
        Build a definition from a ``[quantile, error]`` token pair.

        Raises:
            ValueError: If there are not exactly 2 tokens or one is not numeric
        """
        if len(tokens) != 2:
            raise ValueError(f"Quantiles need exactly 2 parameters. {len(tokens)} given.")
        return cls(parse_number(tokens[0]), parse_number(tokens[1]))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.quantile, self.error)

    def __str__(self) -> str:
        return f"{self.quantile}{QUANTILE_ERROR_SEPARATOR}{self.error}"


DEFAULT_QUANTILES: Tuple[QuantileDefinition, ...] = (
    QuantileDefinition(0.75, 0.5),
    QuantileDefinition(0.95, 0.1),
    QuantileDefinition(0.99, 0.01),
)


def quantiles_to_string(definitions: Iterable[QuantileDefinition]) -> str:
    """Format definitions as ``q,e|q,e|...``."""
    return QUANTILE_DEFINITION_SEPARATOR.join(str(d) for d in definitions)


DEFAULT_QUANTILES_STRING = quantiles_to_string(DEFAULT_QUANTILES)
