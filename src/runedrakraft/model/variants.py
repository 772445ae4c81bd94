"""
Variant Configuration
=====================
Defines the configuration records that turn the single calculation engine
into the individual screens (cryo, nocturne, quantum, ...).

Why is this file needed?
------------------------
1. De-duplication: All variants share one formula shape. Everything that
   differs between them (labels, units, bounds, constants, texts) lives in a
   frozen `VariantConfig` instead of in copies of the engine.
2. Lookup: Variants are registered by KEY so the shell can build one panel per
   registered variant without knowing them in advance.

Classes:
    Intensity: Closed low/mid/high selection shared by all variants.
    Bounds: Closed numeric interval used by widgets and validation.
    FactorSpec: Rules for one free-text factor field.
    SnapshotField: One labelled line of the parameters snapshot.
    VariantConfig: The full per-variant configuration.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable, Dict, Optional, Tuple, Type

from runedrakraft.model.alerts import AlertType
from runedrakraft.utils import clamp


class Intensity(StrEnum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"


class SnapshotFormat(StrEnum):
    """How a parameter value is rendered inside the snapshot."""
    INTEGER = "integer"   # truncated toward zero
    FIXED_1 = "fixed1"    # one decimal place
    RAW = "raw"           # free text, verbatim
    LABEL = "label"       # display label of a choice


@dataclass(frozen=True)
class Bounds:
    minimum: float
    maximum: float
    step: float = 1.0

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def clamp(self, value: float) -> float:
        return clamp(value, self.minimum, self.maximum)

    def describe(self) -> str:
        """Compact human form, e.g. '0.1-10'."""
        return f"{self.minimum:g}-{self.maximum:g}"


@dataclass(frozen=True)
class FactorSpec:
    """
    Validation rules of one free-text factor.
    `bounds` of None means the parsed value is not range-checked.
    """
    label: str
    bounds: Optional[Bounds]
    fallback: float
    missing_message: str
    invalid_message: str = ""
    range_message: str = ""

    def message_for_invalid(self) -> str:
        return self.invalid_message or f"{self.label} must be a number"

    def message_for_range(self) -> str:
        if self.range_message:
            return self.range_message
        if self.bounds is None:
            return f"{self.label} is out of range"
        return f"{self.label} must be {self.bounds.describe()}"


@dataclass(frozen=True)
class SnapshotField:
    label: str
    attribute: str
    fmt: SnapshotFormat
    # Appended verbatim, so it carries its own leading space where needed.
    unit: str = ""


@dataclass(frozen=True)
class ShareLabels:
    """Labels of the shareable result block and the on-screen metrics."""
    title: str
    separator_width: int
    output_label: str
    stability_label: str
    duration_label: str
    timestamp_label: str
    configuration_heading: str
    footer_prefix: str


@dataclass(frozen=True)
class Recommendations:
    low_stability: Tuple[str, ...]
    low_output: Tuple[str, ...]
    optimal: Tuple[str, ...]
    heading: str = "Recommendations"


@dataclass(frozen=True)
class VariantMessages:
    success: str
    reset: str
    copied: str
    help: str
    banner_title: str
    processing: str = "Processing..."
    # Formatted with `primary` (integer form of the primary value)
    banner_detail: str = ""
    alert_titles: Dict[AlertType, str] = field(default_factory=lambda: {
        AlertType.INFO: "Information",
        AlertType.WARNING: "Warning",
        AlertType.ERROR: "Error",
        AlertType.SUCCESS: "Success",
    })


@dataclass(frozen=True)
class SectionTitles:
    parameters: str
    configuration: str
    results: str
    results_heading: str
    submit_button: str
    reset_button: str


@dataclass(frozen=True)
class VariantConfig:
    """
    Everything that distinguishes one calculator screen from another.
    Instances are immutable and shared by every session of the variant.
    """
    key: str
    title: str
    subtitle: str

    # Bounded numeric inputs: (label, unit, bounds, default)
    primary_label: str
    primary_unit: str
    primary_bounds: Bounds
    primary_default: float
    rate_label: str
    rate_unit: str
    rate_bounds: Bounds
    rate_default: float

    factor_a: FactorSpec
    factor_b: FactorSpec

    iterations_label: str
    protocol_label: str
    protocols: Type[StrEnum]
    material_label: str
    materials: Type[StrEnum]
    intensity_title: str
    intensity_labels: Dict[Intensity, str]
    intensity_multipliers: Dict[Intensity, float]
    resonance_label: str

    duration_per_iteration: float
    base_value: Callable[[float], float]

    snapshot_header: Optional[str]
    snapshot_fields: Tuple[SnapshotField, ...]
    share: ShareLabels
    recommendations: Recommendations
    messages: VariantMessages
    sections: SectionTitles

    processing_delay_s: float = 0.0
    iterations_bounds: Bounds = Bounds(1, 10, 1)
    iterations_default: int = 1
    resonance_bounds: Bounds = Bounds(1.0, 5.0, 0.1)
    resonance_default: float = 3.0
    resonance_unit: str = " kHz"
    intensity_default: Intensity = Intensity.MID

    @property
    def default_protocol(self) -> StrEnum:
        return next(iter(self.protocols))

    @property
    def default_material(self) -> StrEnum:
        return next(iter(self.materials))

    def intensity_multiplier(self, intensity: Intensity) -> float:
        return self.intensity_multipliers[Intensity(intensity)]

    def intensity_label(self, intensity: Intensity) -> str:
        return self.intensity_labels[Intensity(intensity)]

    def intensity_from_label(self, label: str) -> Intensity:
        for level, text in self.intensity_labels.items():
            if text == label:
                return level
        raise ValueError(f"Unknown intensity '{label}' for variant '{self.key}'.")


# ------------------------------------------------------------------------------
# Registry
# ------------------------------------------------------------------------------
_REGISTRY: dict[str, VariantConfig] = {}


def register_variant(config: VariantConfig) -> VariantConfig:
    """Register a variant by its KEY."""
    if not config.key:
        raise ValueError("Variant must define a key")
    if config.key in _REGISTRY:
        raise ValueError(f"Variant with key '{config.key}' already exists.")
    _REGISTRY[config.key] = config
    return config


def get_variant(key: str) -> VariantConfig:
    config = _REGISTRY.get(key)
    if config is None:
        raise KeyError(f"No variant registered for key '{key}'")
    return config


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())


def all_variants() -> list[VariantConfig]:
    return list(_REGISTRY.values())
