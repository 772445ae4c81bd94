"""
Input Validation
================
Checks the free-text factor fields before a computation may run.

Error taxonomy (all subclasses of ValueError):
    MissingField: a required field is empty.
    NotANumber: a non-empty field does not parse as a decimal number.
    OutOfRange: a parsed value lies outside the variant's bounds.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from runedrakraft.model.parameters import ParameterSet
    from runedrakraft.model.variants import Bounds, FactorSpec, VariantConfig

logger = logging.getLogger(__name__)

# ASCII decimal notation with optional exponent; no surrounding whitespace.
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class InfusionInputError(ValueError):
    """Base class for user input errors. `str(err)` is the user message."""

    def __init__(self, field: str, label: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.label = label
        self.message = message


class MissingField(InfusionInputError):
    pass


class NotANumber(InfusionInputError):
    def __init__(self, field: str, label: str, message: str, text: str) -> None:
        super().__init__(field, label, message)
        self.text = text


class OutOfRange(InfusionInputError):
    def __init__(self, field: str, label: str, message: str, value: float, bounds: Bounds) -> None:
        super().__init__(field, label, message)
        self.value = value
        self.bounds = bounds


@dataclass(frozen=True)
class ValidationResult:
    factor_a: Optional[float] = None
    factor_b: Optional[float] = None
    error: Optional[InfusionInputError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def parse_decimal(text: str) -> Optional[float]:
    """Parse a decimal number; None when the text is not one."""
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return float(text)


def _check_factor(field: str, text: str, factor: FactorSpec) -> float:
    value = parse_decimal(text)
    if value is None:
        raise NotANumber(field, factor.label, factor.message_for_invalid(), text)
    if factor.bounds is not None and not factor.bounds.contains(value):
        raise OutOfRange(field, factor.label, factor.message_for_range(), value, factor.bounds)
    return value


def validate(params: ParameterSet, variant: VariantConfig) -> ValidationResult:
    """
    Validate the free-text factors of `params` against `variant`.

    Both fields are checked for emptiness first, then each is parsed and
    range-checked in turn. The first failure wins.
    """
    try:
        for field, factor in (("factor_a", variant.factor_a), ("factor_b", variant.factor_b)):
            if not getattr(params, field):
                raise MissingField(field, factor.label, factor.missing_message)

        factor_a = _check_factor("factor_a", params.factor_a, variant.factor_a)
        factor_b = _check_factor("factor_b", params.factor_b, variant.factor_b)
    except InfusionInputError as e:
        logger.debug(f"Validation failed for '{variant.key}': {type(e).__name__} ({e})")
        return ValidationResult(error=e)

    return ValidationResult(factor_a=factor_a, factor_b=factor_b)
