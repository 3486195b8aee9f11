"""Command line front end for wheel generation."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from lottowheel.config import WheelLimits, load_limits
from lottowheel.engine.dispatch import (
    WheelConfig,
    available_presets,
    estimate_ticket_count,
    generate_wheel,
    parse_guarantee,
)
from lottowheel.engine.wheels import normalize_pool
from lottowheel.lotteries import LOTTERIES, LotteryShape


def _parse_pool(raw: str) -> list[int]:
    """Parse "1,2,3" or "1-10,15" into a list of numbers."""
    numbers: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            start, end = (int(value) for value in part.split("-", 1))
            numbers.extend(range(start, end + 1))
        else:
            numbers.append(int(part))
    return numbers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lottery wheel generator")
    parser.add_argument("pool", help="Pool numbers, e.g. '1,5,7-12'")
    parser.add_argument(
        "--lottery",
        choices=sorted(LOTTERIES),
        default="megasena",
        help="Lottery preset providing ticket size and number range",
    )
    parser.add_argument("--game-size", type=int, default=None, help="Override ticket size")
    parser.add_argument("--total-numbers", type=int, default=None, help="Override number range")
    parser.add_argument(
        "--type",
        dest="wheel_type",
        choices=["full", "abbreviated", "balanced"],
        default="full",
    )
    parser.add_argument("--guarantee", default="3-if-4", help="'m-if-t' or 'custom'")
    parser.add_argument("--custom", default=None, help="Custom guarantee as 'm-if-t'")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (balanced wheel)")
    parser.add_argument("--limits", default=None, help="YAML/JSON limits file")
    parser.add_argument("--estimate", action="store_true", help="Only print the ticket estimate")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    preset = LOTTERIES[args.lottery]
    try:
        shape = LotteryShape(
            game_size=args.game_size if args.game_size is not None else preset.game_size,
            total_numbers=(
                args.total_numbers if args.total_numbers is not None else preset.total_numbers
            ),
            name=preset.name,
        )
        limits = load_limits(args.limits) if args.limits else WheelLimits()
        pool = normalize_pool(_parse_pool(args.pool), shape.total_numbers)

        config_data: dict[str, object] = {
            "wheel_type": args.wheel_type,
            "guarantee_level": args.guarantee,
        }
        if args.custom:
            custom = parse_guarantee(args.custom)
            config_data["custom_guarantee"] = {
                "guaranteed": custom.guaranteed,
                "must_match": custom.must_match,
            }
        config = WheelConfig.model_validate(config_data)

        if args.estimate:
            estimate = estimate_ticket_count(len(pool), shape, config, limits=limits)
            print(f"Estimated tickets: {estimate:,}")
            return 0

        result = generate_wheel(
            pool,
            shape,
            config,
            limits=limits,
            seed=args.seed,
            progress=args.progress,
        )
    except (FileNotFoundError, ValueError) as exc:
        # WheelError, ConfigLoadError and pydantic's ValidationError are ValueErrors.
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("=" * 60)
    print(f"{shape.name or 'Custom'} {result.wheel_type} wheel")
    print("=" * 60)
    print(f"Pool ({len(pool)}): {sorted(pool)}")
    if result.wheel_type == "abbreviated":
        print(f"Presets for {shape.game_size}-number tickets: {', '.join(available_presets(shape.game_size))}")
    print(result.guarantee_description)
    print(f"Tickets: {result.ticket_count:,} of {result.full_wheel_count:,} (saves {result.savings_percent}%)")
    print(f"Score: {result.coverage_or_balance_score}")
    print("-" * 60)
    for index, ticket in enumerate(result.tickets, start=1):
        print(f"{index:4d}: {' '.join(f'{number:02d}' for number in ticket)}")
    return 0
