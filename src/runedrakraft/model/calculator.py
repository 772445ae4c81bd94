"""
Infusion Calculator
===================
The parameter-to-result engine shared by every variant.

Why is this file needed?
------------------------
1. Computation: It turns a validated ParameterSet into an immutable
   ResultRecord using the variant's constants.
2. Rendering: It produces the fixed-format snapshot and share texts that the
   clipboard and sharing collaborators consume verbatim.
3. Interpretation: It classifies results (stability rating, recommendations).

Formulas:
    stability_index  = clamp(factor_a * factor_b / 10, 1, 10)
    duration_seconds = iterations * duration_per_iteration
    output_magnitude = base(primary) * rate * intensity * (resonance / 3)
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
import logging
from typing import Callable, Optional, TYPE_CHECKING

import numpy as np

from runedrakraft.model.validation import ValidationResult, parse_decimal, validate
from runedrakraft.model.variants import SnapshotFormat
from runedrakraft.utils import clamp, format_timestamp

if TYPE_CHECKING:
    from runedrakraft.model.parameters import ParameterSet
    from runedrakraft.model.variants import SnapshotField, VariantConfig

logger = logging.getLogger(__name__)

STABILITY_MIN = 1.0
STABILITY_MAX = 10.0
RESONANCE_REFERENCE = 3.0
LOW_STABILITY_THRESHOLD = 5.0
LOW_OUTPUT_THRESHOLD = 50.0
SNAPSHOT_SEPARATOR_WIDTH = 35


class StabilityRating(StrEnum):
    LOW = "low"        # <= 4
    MEDIUM = "medium"  # (4, 7]
    HIGH = "high"      # > 7


class RecommendationTier(StrEnum):
    LOW_STABILITY = "low_stability"
    LOW_OUTPUT = "low_output"
    OPTIMAL = "optimal"


@dataclass(frozen=True)
class ResultRecord:
    output_magnitude: float
    stability_index: float
    duration_seconds: float
    timestamp: datetime
    parameters_snapshot: str


class InfusionCalculator:
    """
    Stateless calculator bound to one variant.
    `clock` supplies the timestamp when `compute` is not given one.
    """

    def __init__(self, variant: VariantConfig, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.variant = variant
        self.clock = clock or datetime.now

    # ---- validation ----

    def validate(self, params: ParameterSet) -> ValidationResult:
        return validate(params, self.variant)

    # ---- computation ----

    def stability_index(self, params: ParameterSet) -> float:
        factor_a = parse_decimal(params.factor_a)
        factor_b = parse_decimal(params.factor_b)
        # Fallbacks are only reachable if validation was bypassed
        if factor_a is None:
            factor_a = self.variant.factor_a.fallback
        if factor_b is None:
            factor_b = self.variant.factor_b.fallback
        return clamp((factor_a * factor_b) / 10.0, STABILITY_MIN, STABILITY_MAX)

    def duration_seconds(self, params: ParameterSet) -> float:
        return params.iterations * self.variant.duration_per_iteration

    def output_magnitude(self, params: ParameterSet) -> float:
        base = self.variant.base_value(params.primary_value)
        multiplier = self.variant.intensity_multiplier(params.intensity)
        return base * params.secondary_rate * multiplier * (params.resonance_frequency / RESONANCE_REFERENCE)

    def compute(self, params: ParameterSet, now: Optional[datetime] = None) -> ResultRecord:
        result = ResultRecord(
            output_magnitude=self.output_magnitude(params),
            stability_index=self.stability_index(params),
            duration_seconds=self.duration_seconds(params),
            timestamp=now if now is not None else self.clock(),
            parameters_snapshot=self.render_snapshot(params),
        )
        logger.info(
            f"[{self.variant.key}] output={result.output_magnitude:.2f} "
            f"stability={result.stability_index:.1f} duration={result.duration_seconds:.1f}s"
        )
        return result

    # ---- rendering ----

    def _format_field(self, params: ParameterSet, field: SnapshotField) -> str:
        value = getattr(params, field.attribute)
        match field.fmt:
            case SnapshotFormat.INTEGER:
                text = str(int(value))
            case SnapshotFormat.FIXED_1:
                text = f"{value:.1f}"
            case SnapshotFormat.LABEL if field.attribute == "intensity":
                text = self.variant.intensity_label(value)
            case _:
                text = str(value)
        return f"{field.label}: {text}{field.unit}"

    def render_snapshot(self, params: ParameterSet) -> str:
        lines: list[str] = []
        header = self.variant.snapshot_header
        if header:
            lines.append(header)
            lines.append("-" * SNAPSHOT_SEPARATOR_WIDTH)
        lines.extend(self._format_field(params, f) for f in self.variant.snapshot_fields)
        return "\n".join(lines)

    def metric_labels(self) -> list[str]:
        share = self.variant.share
        return [share.output_label, share.stability_label, share.duration_label, share.timestamp_label]

    def metric_rows(self, result: ResultRecord) -> list[tuple[str, str]]:
        """(label, value) pairs as shown on screen."""
        values = [
            f"{result.output_magnitude:.2f} MW",
            f"{result.stability_index:.1f}/10",
            f"{result.duration_seconds:.1f} sec",
            format_timestamp(result.timestamp),
        ]
        return list(zip(self.metric_labels(), values))

    def render_share_text(self, result: ResultRecord) -> str:
        share = self.variant.share
        lines = [
            share.title,
            "-" * share.separator_width,
            f"{share.output_label}: {result.output_magnitude:.2f} MW",
            f"{share.stability_label}: {result.stability_index:.1f}/10",
            f"{share.duration_label}: {result.duration_seconds:.1f} seconds",
            "",
            f"{share.configuration_heading}:",
            result.parameters_snapshot,
            "",
            f"{share.footer_prefix} {format_timestamp(result.timestamp)}",
        ]
        return "\n".join(lines)

    # ---- interpretation ----

    @staticmethod
    def stability_rating(index: float) -> StabilityRating:
        if index > 7:
            return StabilityRating.HIGH
        if index > 4:
            return StabilityRating.MEDIUM
        return StabilityRating.LOW

    @staticmethod
    def recommendation_tier(result: ResultRecord) -> RecommendationTier:
        if result.stability_index < LOW_STABILITY_THRESHOLD:
            return RecommendationTier.LOW_STABILITY
        if result.output_magnitude < LOW_OUTPUT_THRESHOLD:
            return RecommendationTier.LOW_OUTPUT
        return RecommendationTier.OPTIMAL

    def recommendations(self, result: ResultRecord) -> list[str]:
        tier = self.recommendation_tier(result)
        return list(getattr(self.variant.recommendations, tier.value))

    def primary_hue(self, value: float) -> float:
        """Hue in [0.2, 0.6] for the primary value, cold (blue) at the minimum."""
        bounds = self.variant.primary_bounds
        return float(np.interp(value, [bounds.minimum, bounds.maximum], [0.6, 0.2]))
