"""Built-in Calculator Variants (Catalog)."""
from enum import StrEnum

from runedrakraft.config import PROCESSING_DELAY_S
from runedrakraft.model.alerts import AlertType
from runedrakraft.model.variants import (
    Bounds, FactorSpec, Intensity, Recommendations, SectionTitles, ShareLabels,
    SnapshotField, SnapshotFormat, VariantConfig, VariantMessages, register_variant
)

F = SnapshotFormat


# ------------------------------------------------------------------------------
# Ironhollow Frostshriek (cryo)
# ------------------------------------------------------------------------------
class CryoProtocol(StrEnum):
    GLACIAL = "Glacial Protocol"
    ARCTIC = "Arctic Protocol"
    POLAR = "Polar Protocol"
    ABSOLUTE_ZERO = "Absolute Zero Protocol"

class FrostMatrix(StrEnum):
    ICE = "Ice Matrix"
    SNOW = "Snow Composite"
    HAIL = "Hail Alloy"


FROSTSHRIEK = register_variant(VariantConfig(
    key="frostshriek",
    title="Ironhollow Frostshriek",
    subtitle="Cryogenic Quantum Infusion Nexus",
    primary_label="Core Temperature",
    primary_unit="°K",
    primary_bounds=Bounds(-273.0, 0.0, 1.0),
    primary_default=-50.0,
    rate_label="Cryo Injection Rate",
    rate_unit=" mL/s",
    rate_bounds=Bounds(0.1, 10.0, 0.1),
    rate_default=2.5,
    factor_a=FactorSpec(
        label="Frostbite Factor",
        bounds=Bounds(1.0, 100.0),
        fallback=5.0,
        missing_message="Frostbite Factor required",
        invalid_message="Frostbite Factor must be 1-100",
    ),
    # No range check on the stabilizer, see DESIGN.md
    factor_b=FactorSpec(
        label="Stabilizer Constant",
        bounds=None,
        fallback=1.0,
        missing_message="Stabilizer Constant required",
    ),
    iterations_label="Iterations",
    protocol_label="Cryo Protocol",
    protocols=CryoProtocol,
    material_label="Frost Matrix",
    materials=FrostMatrix,
    intensity_title="Cryo Intensity",
    intensity_labels={Intensity.LOW: "Mild", Intensity.MID: "Moderate", Intensity.HIGH: "Extreme"},
    intensity_multipliers={Intensity.LOW: 0.7, Intensity.MID: 1.0, Intensity.HIGH: 1.5},
    resonance_label="Resonance Frequency",
    duration_per_iteration=0.8,
    # Cryo temperatures are negative by convention
    base_value=abs,
    snapshot_header="Ironhollow Frostshriek Configuration",
    snapshot_fields=(
        SnapshotField("Core Temperature", "primary_value", F.INTEGER, "°K"),
        SnapshotField("Cryo Rate", "secondary_rate", F.FIXED_1, " mL/s"),
        SnapshotField("Frostbite Factor", "factor_a", F.RAW),
        SnapshotField("Stabilizer Constant", "factor_b", F.RAW),
        SnapshotField("Iterations", "iterations", F.INTEGER),
        SnapshotField("Protocol", "protocol", F.LABEL),
        SnapshotField("Matrix", "material", F.LABEL),
        SnapshotField("Intensity", "intensity", F.LABEL),
        SnapshotField("Resonance", "resonance_frequency", F.FIXED_1, " kHz"),
    ),
    share=ShareLabels(
        title="Ironhollow Frostshriek Results",
        separator_width=29,
        output_label="Energy Absorption",
        stability_label="Stability Index",
        duration_label="Duration",
        timestamp_label="Timestamp",
        configuration_heading="Configuration",
        footer_prefix="Generated on",
    ),
    recommendations=Recommendations(
        heading="Cryo Recommendations",
        low_stability=(
            "Increase stabilizer constant by 15-20%",
            "Reduce cryo rate by 10-15%",
            "Consider using Snow Composite matrix",
        ),
        low_output=(
            "Increase core temperature gradient",
            "Try Arctic or Polar protocols",
            "Consider Extreme intensity setting",
        ),
        optimal=(
            "Parameters are within optimal range",
            "Consider increasing iterations for deeper infusion",
        ),
    ),
    messages=VariantMessages(
        success="Cryo infusion successful!",
        reset="Chamber reset to default parameters",
        copied="Cryo data copied",
        processing="Stabilizing Cryo Matrix...",
        banner_title="CRYO INFUSION COMPLETE",
        banner_detail="Frost matrix stabilized at {primary}°K",
        help=(
            "Ironhollow Frostshriek Manual\n"
            "----------------------------\n"
            "1. Set core temperature (-273°K to 0°K)\n"
            "2. Configure cryo injection rate\n"
            "3. Enter frostbite factor (1-100)\n"
            "4. Set stabilizer constant (0.1-10)\n"
            "5. Select protocol and matrix\n"
            "6. Adjust resonance frequency\n"
            "7. Initiate cryo infusion\n"
            "\n"
            "Warning: Extreme temperatures may cause quantum instability."
        ),
    ),
    sections=SectionTitles(
        parameters="CRYO PARAMETERS",
        configuration="CRYO CONFIGURATION",
        results="CRYO RESULTS",
        results_heading="Results Analysis",
        submit_button="Initiate Cryo Infusion",
        reset_button="Reset Chamber",
    ),
    processing_delay_s=PROCESSING_DELAY_S,
))


# ------------------------------------------------------------------------------
# Nightveil Duskwhisper (nocturne)
# ------------------------------------------------------------------------------
class NocturneProtocol(StrEnum):
    DUSK = "Dusk Protocol"
    TWILIGHT = "Twilight Protocol"
    NOCTURNE = "Nocturne Protocol"
    ECLIPSE = "Eclipse Protocol"

class CelestialMatrix(StrEnum):
    LUNAR = "Lunar Matrix"
    STELLAR = "Stellar Composite"
    CELESTIAL = "Celestial Alloy"


DUSKWHISPER = register_variant(VariantConfig(
    key="duskwhisper",
    title="Nightveil Duskwhisper",
    subtitle="Quantum resonance modulation system",
    primary_label="Core Luminescence",
    primary_unit=" lumens",
    primary_bounds=Bounds(1.0, 100.0, 1.0),
    primary_default=50.0,
    rate_label="Duskwave Frequency",
    rate_unit=" kHz",
    rate_bounds=Bounds(0.1, 5.0, 0.1),
    rate_default=2.5,
    factor_a=FactorSpec(
        label="Shadow Coefficient",
        bounds=Bounds(1.0, 100.0),
        fallback=5.0,
        missing_message="Please enter Shadow Coefficient",
    ),
    factor_b=FactorSpec(
        label="Twilight Constant",
        bounds=Bounds(0.1, 10.0),
        fallback=1.0,
        missing_message="Please enter Twilight Constant",
    ),
    iterations_label="Echo Iterations",
    protocol_label="Dusk Protocol",
    protocols=NocturneProtocol,
    material_label="Celestial Matrix",
    materials=CelestialMatrix,
    intensity_title="Resonance Intensity",
    intensity_labels={Intensity.LOW: "Whisper", Intensity.MID: "Murmur", Intensity.HIGH: "Resonance"},
    intensity_multipliers={Intensity.LOW: 0.7, Intensity.MID: 1.0, Intensity.HIGH: 1.8},
    resonance_label="Sparkle Frequency",
    duration_per_iteration=0.5,
    base_value=float,
    snapshot_header=None,
    snapshot_fields=(
        SnapshotField("Sparkle Frequency", "resonance_frequency", F.FIXED_1, " kHz"),
        SnapshotField("Core Luminescence", "primary_value", F.INTEGER, " lumens"),
        SnapshotField("Duskwave Frequency", "secondary_rate", F.FIXED_1, " kHz"),
        SnapshotField("Shadow Coefficient", "factor_a", F.RAW),
        SnapshotField("Twilight Constant", "factor_b", F.RAW),
        SnapshotField("Echo Iterations", "iterations", F.INTEGER),
        SnapshotField("Dusk Protocol", "protocol", F.LABEL),
        SnapshotField("Celestial Matrix", "material", F.LABEL),
        SnapshotField("Resonance", "intensity", F.LABEL),
    ),
    share=ShareLabels(
        title="Nightveil Duskwhisper Echoes",
        separator_width=27,
        output_label="Luminous Output",
        stability_label="Harmony Index",
        duration_label="Dusk Duration",
        timestamp_label="Moon Phase",
        configuration_heading="Celestial Configuration",
        footer_prefix="Recorded during",
    ),
    recommendations=Recommendations(
        heading="Celestial Guidance",
        low_stability=(
            "Increase twilight constant",
            "Reduce duskwave frequency by 10-15%",
            "Consider using Stellar Composite",
        ),
        low_output=(
            "Increase core luminescence",
            "Try Nocturne Protocol",
            "Consider Resonance intensity",
        ),
        optimal=(
            "Parameters are harmonious",
            "Consider increasing echo iterations",
        ),
    ),
    messages=VariantMessages(
        success="Nocturne resonance achieved!",
        reset="Veil restored to twilight state",
        copied="Echoes copied to scroll",
        processing="Gathering dusk echoes...",
        banner_title="Nocturne Complete!",
        help=(
            "Eldritch Guide:\n"
            "1. Set all celestial parameters\n"
            "2. Configure nocturne settings\n"
            "3. Begin the duskwhisper\n"
            "4. Interpret the resonance echoes"
        ),
        alert_titles={
            AlertType.INFO: "Whisper",
            AlertType.WARNING: "Caution",
            AlertType.ERROR: "Disturbance",
            AlertType.SUCCESS: "Harmony",
        },
    ),
    sections=SectionTitles(
        parameters="Resonance Parameters",
        configuration="Nocturne Configuration",
        results="Duskwhisper Echoes",
        results_heading="Resonance Echoes",
        submit_button="Begin Nocturne",
        reset_button="Reset Veil",
    ),
))


# ------------------------------------------------------------------------------
# Quantum Infusion Nexus
# ------------------------------------------------------------------------------
class QuantumProtocol(StrEnum):
    BASIC = "Basic Protocol"
    ENHANCED = "Enhanced Protocol"
    QUANTUM = "Quantum Protocol"
    SINGULARITY = "Singularity Protocol"

class QuantumMaterial(StrEnum):
    ALPHA = "Alpha Matrix"
    BETA = "Beta Composite"
    GAMMA = "Gamma Alloy"


QUANTUM = register_variant(VariantConfig(
    key="quantum",
    title="Quantum Infusion Nexus",
    subtitle="Advanced protocol modulation system",
    primary_label="Core Value",
    primary_unit="",
    primary_bounds=Bounds(1.0, 100.0, 1.0),
    primary_default=50.0,
    rate_label="Infusion Rate",
    rate_unit="",
    rate_bounds=Bounds(0.1, 5.0, 0.1),
    rate_default=2.5,
    factor_a=FactorSpec(
        label="Plinthride Factor",
        bounds=Bounds(1.0, 100.0),
        fallback=5.0,
        missing_message="Please enter Plinthride Factor",
    ),
    factor_b=FactorSpec(
        label="Stabilizer Constant",
        bounds=Bounds(0.1, 10.0),
        fallback=1.0,
        missing_message="Please enter Stabilizer Constant",
    ),
    iterations_label="Iterations",
    protocol_label="Infusion Protocol",
    protocols=QuantumProtocol,
    material_label="Material Matrix",
    materials=QuantumMaterial,
    intensity_title="Intensity Level",
    intensity_labels={Intensity.LOW: "Minimal", Intensity.MID: "Moderate", Intensity.HIGH: "Extreme"},
    intensity_multipliers={Intensity.LOW: 0.7, Intensity.MID: 1.0, Intensity.HIGH: 1.8},
    resonance_label="Sparkle Frequency",
    duration_per_iteration=0.5,
    base_value=float,
    snapshot_header=None,
    snapshot_fields=(
        SnapshotField("Sparkle Frequency", "resonance_frequency", F.FIXED_1, " kHz"),
        SnapshotField("Core Value", "primary_value", F.INTEGER),
        SnapshotField("Infusion Rate", "secondary_rate", F.FIXED_1),
        SnapshotField("Plinthride Factor", "factor_a", F.RAW),
        SnapshotField("Stabilizer Constant", "factor_b", F.RAW),
        SnapshotField("Iterations", "iterations", F.INTEGER),
        SnapshotField("Infusion Protocol", "protocol", F.LABEL),
        SnapshotField("Material Matrix", "material", F.LABEL),
        SnapshotField("Intensity", "intensity", F.LABEL),
    ),
    share=ShareLabels(
        title="Quantum Infusion Results",
        separator_width=23,
        output_label="Energy Output",
        stability_label="Stability Index",
        duration_label="Duration",
        timestamp_label="Timestamp",
        configuration_heading="Configuration",
        footer_prefix="Generated on",
    ),
    recommendations=Recommendations(
        low_stability=(
            "Increase stabilizer constant",
            "Reduce infusion rate by 10-15%",
            "Consider using Beta Composite material",
        ),
        low_output=(
            "Increase core value",
            "Try Quantum Protocol",
            "Consider Extreme intensity",
        ),
        optimal=(
            "Parameters are optimal",
            "Consider increasing iterations",
        ),
    ),
    messages=VariantMessages(
        success="Infusion completed successfully!",
        reset="Form reset to default values",
        copied="Results copied to clipboard",
        processing="Running infusion...",
        banner_title="Infusion Complete!",
        help=(
            "Quantum Infusion Guide:\n"
            "1. Set all parameters\n"
            "2. Configure infusion settings\n"
            "3. Press Start Infusion\n"
            "4. View results & recommendations"
        ),
    ),
    sections=SectionTitles(
        parameters="Infusion Parameters",
        configuration="Infusion Configuration",
        results="Infusion Results",
        results_heading="Results",
        submit_button="Start Infusion",
        reset_button="Reset",
    ),
))
