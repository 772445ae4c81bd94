from datetime import datetime

import pytest

from runedrakraft.model.calculator import (
    InfusionCalculator, RecommendationTier, ResultRecord, StabilityRating
)
from runedrakraft.model.catalog import DUSKWHISPER, FROSTSHRIEK, CryoProtocol
from runedrakraft.model.variants import Intensity

from conftest import FIXED_NOW

CRYO_SNAPSHOT = "\n".join([
    "Ironhollow Frostshriek Configuration",
    "-" * 35,
    "Core Temperature: -50°K",
    "Cryo Rate: 2.5 mL/s",
    "Frostbite Factor: 10",
    "Stabilizer Constant: 5",
    "Iterations: 1",
    "Protocol: Glacial Protocol",
    "Matrix: Ice Matrix",
    "Intensity: Moderate",
    "Resonance: 3.0 kHz",
])


def test_cryo_example(cryo_calc, cryo_params):
    result = cryo_calc.compute(cryo_params)
    assert result.stability_index == pytest.approx(5.0)
    assert result.duration_seconds == pytest.approx(0.8)
    assert result.output_magnitude == pytest.approx(125.0)
    assert result.timestamp == FIXED_NOW


def test_quantum_example(quantum_calc, quantum_params):
    result = quantum_calc.compute(quantum_params)
    assert result.stability_index == pytest.approx(1.6)
    assert result.duration_seconds == pytest.approx(1.0)
    assert result.output_magnitude == pytest.approx(225.0)


def test_compute_is_deterministic(cryo_calc, cryo_params):
    assert cryo_calc.compute(cryo_params) == cryo_calc.compute(cryo_params)


def test_explicit_timestamp_overrides_clock(cryo_calc, cryo_params):
    moment = datetime(2025, 1, 1, 9, 0)
    assert cryo_calc.compute(cryo_params, now=moment).timestamp == moment


@pytest.mark.parametrize("factor_a, factor_b, expected", [
    ("1", "0.1", 1.0),
    ("100", "10", 10.0),
    ("20", "2.5", 5.0),
    ("10", "1000", 10.0),
])
def test_stability_index_is_clamped(cryo_calc, cryo_params, factor_a, factor_b, expected):
    params = cryo_params.copy(factor_a=factor_a, factor_b=factor_b)
    assert cryo_calc.stability_index(params) == pytest.approx(expected)


def test_stability_fallbacks_when_validation_bypassed(cryo_calc, cryo_params):
    assert cryo_calc.stability_index(cryo_params.copy(factor_a="", factor_b="4")) == pytest.approx(2.0)
    assert cryo_calc.stability_index(cryo_params.copy(factor_a="30", factor_b="x")) == pytest.approx(3.0)


def test_cryo_uses_absolute_temperature(cryo_calc, cryo_params):
    params = cryo_params.copy(primary_value=-200.0, secondary_rate=1.0, intensity=Intensity.HIGH)
    assert cryo_calc.output_magnitude(params) == pytest.approx(300.0)


def test_output_scales_with_resonance(clock, nocturne_params):
    calc = InfusionCalculator(DUSKWHISPER, clock=clock)
    params = nocturne_params.copy(resonance_frequency=1.5, intensity=Intensity.LOW)
    # 50 * 2.5 * 0.7 * 0.5
    assert calc.output_magnitude(params) == pytest.approx(43.75)


@pytest.mark.parametrize("iterations", [1, 4, 10])
def test_duration(cryo_calc, quantum_calc, cryo_params, quantum_params, iterations):
    assert cryo_calc.duration_seconds(cryo_params.copy(iterations=iterations)) == pytest.approx(0.8 * iterations)
    assert quantum_calc.duration_seconds(quantum_params.copy(iterations=iterations)) == pytest.approx(0.5 * iterations)


def test_cryo_snapshot(cryo_calc, cryo_params):
    assert cryo_calc.render_snapshot(cryo_params) == CRYO_SNAPSHOT


def test_snapshot_truncates_primary_toward_zero(cryo_calc, cryo_params):
    snapshot = cryo_calc.render_snapshot(cryo_params.copy(primary_value=-49.7))
    assert "Core Temperature: -49°K" in snapshot


def test_snapshot_without_header(quantum_calc, quantum_params):
    lines = quantum_calc.render_snapshot(quantum_params).splitlines()
    assert lines[0] == "Sparkle Frequency: 3.0 kHz"
    assert lines[1] == "Core Value: 50"
    assert lines[2] == "Infusion Rate: 2.5"
    assert lines[-1] == "Intensity: Extreme"


def test_snapshot_shows_changed_choices(cryo_calc, cryo_params):
    params = cryo_params.copy(protocol=CryoProtocol.POLAR, intensity=Intensity.LOW)
    snapshot = cryo_calc.render_snapshot(params)
    assert "Protocol: Polar Protocol" in snapshot
    assert "Intensity: Mild" in snapshot


def test_cryo_share_text(cryo_calc, cryo_params):
    result = cryo_calc.compute(cryo_params)
    expected = "\n".join([
        "Ironhollow Frostshriek Results",
        "-" * 29,
        "Energy Absorption: 125.00 MW",
        "Stability Index: 5.0/10",
        "Duration: 0.8 seconds",
        "",
        "Configuration:",
        CRYO_SNAPSHOT,
        "",
        "Generated on 10/19/2026, 3:04 PM",
    ])
    assert cryo_calc.render_share_text(result) == expected


def test_nocturne_share_text(clock, nocturne_params):
    calc = InfusionCalculator(DUSKWHISPER, clock=clock)
    result = calc.compute(nocturne_params)
    expected = "\n".join([
        "Nightveil Duskwhisper Echoes",
        "-" * 27,
        "Luminous Output: 125.00 MW",
        "Harmony Index: 10.0/10",
        "Dusk Duration: 0.5 seconds",
        "",
        "Celestial Configuration:",
        "Sparkle Frequency: 3.0 kHz",
        "Core Luminescence: 50 lumens",
        "Duskwave Frequency: 2.5 kHz",
        "Shadow Coefficient: 50",
        "Twilight Constant: 2",
        "Echo Iterations: 1",
        "Dusk Protocol: Dusk Protocol",
        "Celestial Matrix: Lunar Matrix",
        "Resonance: Murmur",
        "",
        "Recorded during 10/19/2026, 3:04 PM",
    ])
    assert calc.render_share_text(result) == expected


def test_quantum_share_text(quantum_calc, quantum_params):
    result = quantum_calc.compute(quantum_params)
    expected = "\n".join([
        "Quantum Infusion Results",
        "-" * 23,
        "Energy Output: 225.00 MW",
        "Stability Index: 1.6/10",
        "Duration: 1.0 seconds",
        "",
        "Configuration:",
        "Sparkle Frequency: 3.0 kHz",
        "Core Value: 50",
        "Infusion Rate: 2.5",
        "Plinthride Factor: 8",
        "Stabilizer Constant: 2",
        "Iterations: 2",
        "Infusion Protocol: Basic Protocol",
        "Material Matrix: Alpha Matrix",
        "Intensity: Extreme",
        "",
        "Generated on 10/19/2026, 3:04 PM",
    ])
    assert quantum_calc.render_share_text(result) == expected


def test_share_text_embeds_snapshot_verbatim(quantum_calc, quantum_params):
    result = quantum_calc.compute(quantum_params)
    text = quantum_calc.render_share_text(result)
    assert result.parameters_snapshot in text
    assert text.splitlines()[0] == "Quantum Infusion Results"


def test_metric_rows(quantum_calc, quantum_params):
    result = quantum_calc.compute(quantum_params)
    assert quantum_calc.metric_rows(result) == [
        ("Energy Output", "225.00 MW"),
        ("Stability Index", "1.6/10"),
        ("Duration", "1.0 sec"),
        ("Timestamp", "10/19/2026, 3:04 PM"),
    ]


@pytest.mark.parametrize("index, rating", [
    (1.0, StabilityRating.LOW),
    (4.0, StabilityRating.LOW),
    (4.1, StabilityRating.MEDIUM),
    (7.0, StabilityRating.MEDIUM),
    (7.5, StabilityRating.HIGH),
])
def test_stability_rating(index, rating):
    assert InfusionCalculator.stability_rating(index) == rating


def _record(output, stability):
    return ResultRecord(output, stability, 1.0, FIXED_NOW, "")


@pytest.mark.parametrize("output, stability, tier", [
    (10.0, 2.0, RecommendationTier.LOW_STABILITY),
    (10.0, 5.0, RecommendationTier.LOW_OUTPUT),
    (50.0, 5.0, RecommendationTier.OPTIMAL),
])
def test_recommendation_tier(output, stability, tier):
    assert InfusionCalculator.recommendation_tier(_record(output, stability)) == tier


def test_recommendations_text(cryo_calc, quantum_calc):
    assert cryo_calc.recommendations(_record(125.0, 5.0)) == [
        "Parameters are within optimal range",
        "Consider increasing iterations for deeper infusion",
    ]
    assert quantum_calc.recommendations(_record(225.0, 1.6))[0] == "Increase stabilizer constant"


def test_primary_hue(cryo_calc):
    assert cryo_calc.primary_hue(-273.0) == pytest.approx(0.6)
    assert cryo_calc.primary_hue(0.0) == pytest.approx(0.2)
    assert 0.2 < cryo_calc.primary_hue(-50.0) < 0.6
