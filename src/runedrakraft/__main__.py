"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from runedrakraft.config import DEFAULT_LOG_LEVEL
from runedrakraft.logging_config import setup_logging
from runedrakraft.model.parameters import ParameterSet
from runedrakraft.model.session import InfusionSession
from runedrakraft.model.variants import VariantConfig, get_variant, list_keys

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="runedrakraft",
        description="Run one infusion calculation and print the shareable result.",
    )
    parser.add_argument("--variant", default="frostshriek", help="Variant key (see --list-variants).")
    parser.add_argument("--list-variants", action="store_true", help="List the available variants and exit.")
    parser.add_argument("--primary", type=float, help="Primary value (temperature, luminescence, core value).")
    parser.add_argument("--rate", type=float, help="Secondary rate.")
    parser.add_argument("--factor-a", default="", help="First free-text factor.")
    parser.add_argument("--factor-b", default="", help="Second free-text factor.")
    parser.add_argument("--iterations", type=int, help="Number of iterations (1-10).")
    parser.add_argument("--protocol", help="Protocol label, e.g. 'Arctic Protocol'.")
    parser.add_argument("--material", help="Material label, e.g. 'Snow Composite'.")
    parser.add_argument("--intensity", help="Intensity label, e.g. 'Extreme'.")
    parser.add_argument("--resonance", type=float, help="Resonance frequency (1-5).")
    parser.add_argument("--recommendations", action="store_true", help="Also print the recommendations.")
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. debug.")
    return parser


def params_from_args(args: argparse.Namespace, variant: VariantConfig) -> ParameterSet:
    """Build a ParameterSet from CLI arguments, falling back to variant defaults."""
    params = ParameterSet.defaults_for(variant)
    params.factor_a = args.factor_a
    params.factor_b = args.factor_b
    if args.primary is not None:
        params.primary_value = args.primary
    if args.rate is not None:
        params.secondary_rate = args.rate
    if args.iterations is not None:
        params.iterations = args.iterations
    if args.resonance is not None:
        params.resonance_frequency = args.resonance
    if args.protocol:
        params.protocol = variant.protocols(args.protocol)
    if args.material:
        params.material = variant.materials(args.material)
    if args.intensity:
        params.intensity = variant.intensity_from_label(args.intensity)
    # Sliders and steppers cannot leave their range; neither can the CLI
    params.clamp_to(variant)
    return params


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        setup_logging(level=args.log_level)
    else:
        logging.getLogger("runedrakraft").setLevel(max(DEFAULT_LOG_LEVEL, logging.WARNING))

    if args.list_variants:
        for key in list_keys():
            variant = get_variant(key)
            print(f"{key}: {variant.title} - {variant.subtitle}")
        return 0

    try:
        variant = get_variant(args.variant)
        params = params_from_args(args, variant)
    except (KeyError, ValueError) as e:
        parser.error(str(e))

    session = InfusionSession(variant)
    session.params = params
    alert = session.submit()
    if alert is not None:
        print(f"{alert.title}: {alert.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(session.share_text())
    if args.recommendations:
        print()
        print(f"{variant.recommendations.heading}:")
        for line in session.recommendations():
            print(f"• {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
