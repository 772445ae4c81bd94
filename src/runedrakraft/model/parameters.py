"""
Parameter Set (Input State)
===========================
The mutable inputs of one calculator screen.

Why is this file needed?
------------------------
1. State Management: It holds every value the user can edit, in one place.
2. Defaults: It knows how to restore the variant's default values (reset).
3. Decoupling: Widgets write to this object; the calculator only reads it.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import TYPE_CHECKING, Any

from runedrakraft.model.variants import Intensity

if TYPE_CHECKING:
    from runedrakraft.model.variants import VariantConfig

logger = logging.getLogger(__name__)


@dataclass
class ParameterSet:
    primary_value: float
    secondary_rate: float
    protocol: StrEnum
    material: StrEnum
    # Free text, validated before computation
    factor_a: str = ""
    factor_b: str = ""
    iterations: int = 1
    intensity: Intensity = Intensity.MID
    resonance_frequency: float = 3.0

    @classmethod
    def defaults_for(cls, variant: VariantConfig) -> ParameterSet:
        return cls(
            primary_value=variant.primary_default,
            secondary_rate=variant.rate_default,
            protocol=variant.default_protocol,
            material=variant.default_material,
            iterations=variant.iterations_default,
            intensity=variant.intensity_default,
            resonance_frequency=variant.resonance_default,
        )

    def reset(self, variant: VariantConfig) -> None:
        """Restore the variant defaults in place."""
        defaults = ParameterSet.defaults_for(variant)
        for f in dataclasses.fields(self):
            setattr(self, f.name, getattr(defaults, f.name))
        logger.debug(f"Parameters of '{variant.key}' reset to defaults.")

    def copy(self, **changes: Any) -> ParameterSet:
        return dataclasses.replace(self, **changes)

    def clamp_to(self, variant: VariantConfig) -> None:
        """
        Apply the widget bounds to the numeric fields.
        Widgets already enforce these; this is for other callers (CLI, scripts).
        """
        self.primary_value = variant.primary_bounds.clamp(self.primary_value)
        self.secondary_rate = variant.rate_bounds.clamp(self.secondary_rate)
        self.resonance_frequency = variant.resonance_bounds.clamp(self.resonance_frequency)
        self.iterations = int(variant.iterations_bounds.clamp(self.iterations))

    def to_dict(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        for key in ("protocol", "material", "intensity"):
            data[key] = str(data[key])
        return data
