"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions, enabling
the scorers and the match predicate directly in Polars expression contexts.
Null values are scored as empty strings.

Example:
    >>> import polars as pl
    >>> import fuzzymatch  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["kitten", "kiten", "mitten"]})
    >>> df.with_columns(
    ...     close=pl.col("name").fuzzy.is_match("kitten"),
    ...     abbrev=pl.col("name").fuzzy.abbrev_score("kt"),
    ... )
"""

from typing import Literal, Union

import polars as pl

from fuzzymatch._utils import (
    DEFAULT_ERROR_RATE,
    DEFAULT_LENGTH_DIFFERENCE,
    check_str,
    validate_count,
    validate_range,
)
from fuzzymatch.enums import Algorithm
from fuzzymatch.matching import fuzzy_match
from fuzzymatch.scoring import quicksilver_score, resolve_scorer

AlgorithmName = Union[str, Algorithm, Literal["jaro", "jaro_winkler", "quicksilver"]]


def _text(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, other: Union[str, pl.Expr], func, return_dtype) -> pl.Expr:
        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: func(_text(s), other),
                return_dtype=return_dtype,
                skip_nulls=False,
            )
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_text(row["_left"]), _text(row["_right"])),
            return_dtype=return_dtype,
        )

    def similarity(
        self,
        other: Union[str, pl.Expr],
        algorithm: AlgorithmName = "jaro_winkler",
    ) -> pl.Expr:
        """
        Calculate the score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            algorithm: Scorer to use (string or Algorithm enum)

        Returns:
            Expression producing scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzy.similarity(pl.col("name2"))
            ... )
        """
        scorer = resolve_scorer(algorithm)
        return self._pairwise(other, scorer, pl.Float64)

    def is_match(
        self,
        other: Union[str, pl.Expr],
        max_length_difference: int = DEFAULT_LENGTH_DIFFERENCE,
        error_rate: float = DEFAULT_ERROR_RATE,
        algorithm: AlgorithmName = "jaro_winkler",
    ) -> pl.Expr:
        """
        Apply :func:`fuzzymatch.fuzzy_match` row by row.

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_match("kitten", error_rate=0.05))
        """
        scorer = resolve_scorer(algorithm)
        max_length_difference = validate_count("max_length_difference", max_length_difference)
        error_rate = validate_range("error_rate", error_rate)

        def predicate(a: str, b: str) -> bool:
            return fuzzy_match(
                a,
                b,
                scorer=scorer,
                max_length_difference=max_length_difference,
                error_rate=error_rate,
            )

        return self._pairwise(other, predicate, pl.Boolean)

    def abbrev_score(self, abbrev: str) -> pl.Expr:
        """
        Score each value as a target of the abbreviation ``abbrev``.

        Example:
            >>> df.sort(pl.col("command").fuzzy.abbrev_score("ff"), descending=True)
        """
        check_str("abbrev", abbrev)
        return self._expr.map_elements(
            lambda s: quicksilver_score(_text(s), abbrev),
            return_dtype=pl.Float64,
            skip_nulls=False,
        )


__all__ = ["FuzzyExprNamespace"]
