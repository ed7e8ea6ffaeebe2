"""
Command-line entry point.

Runs one search against the discovery service, prints the top destination
cards and, optionally, the detail profile of one destination.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from tripfinder.details.client import DetailClient
from tripfinder.details.normalize import DestinationProfile
from tripfinder.discovery.client import DiscoveryClient
from tripfinder.query.normalizer import normalize_query
from tripfinder.query.params import encode_search_form
from tripfinder.shared.config import load_config
from tripfinder.shared.http.client import ServiceClient
from tripfinder.shared.logging.config import setup_logging
from tripfinder.view.cards import DestinationCard, format_cost
from tripfinder.view.machine import DestinationsView


# ============================================================================
# Logging configuration (single source of truth for the command line)
# ============================================================================
LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-35s | %(message)s"
)


def configure_logging(
    verbose: bool = False,
    json_logs: bool = False,
    log_file: Optional[str] = None,
) -> None:
    level = logging.INFO if verbose else logging.WARNING

    if json_logs:
        setup_logging(level=level, log_file=log_file)
    else:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=[logging.StreamHandler(sys.stderr)],
            force=True,
        )

    # Quiet noisy third-party loggers
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tripfinder",
        description="Find top destinations for a trip and estimate its cost.",
    )
    parser.add_argument("--starting-city", dest="startingCity")
    parser.add_argument("--start-date", dest="startDate", help="YYYY-MM-DD")
    parser.add_argument("--end-date", dest="endDate", help="YYYY-MM-DD")
    parser.add_argument("--flight-budget", dest="flightBudget")
    parser.add_argument("--hotel-budget", dest="hotelBudget")
    parser.add_argument("--activities-budget", dest="activitiesBudget")
    parser.add_argument("--vacation-type", dest="vacationType")
    parser.add_argument("--people", dest="numberOfPeople", default="1")
    parser.add_argument("--select", help="Destination id to show details for")
    parser.add_argument("--base-url", help="Override TRIPFINDER_BASE_URL")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log records")
    parser.add_argument("--log-file", help="Also write JSON log records to this file")
    return parser


def format_card(index: int, card: DestinationCard) -> str:
    lines = [
        f"{index}. {card.name}, {card.country} [{card.destination_type}] (id={card.id})",
        f"   {'*' * card.stars} {card.rating}",
        f"   {card.description_preview}",
        f"   Estimated Total Cost: {card.cost_label}",
    ]
    if card.highlights_preview:
        lines.append(f"   Popular Activities: {', '.join(card.highlights_preview)}")
    return "\n".join(lines)


def format_profile(profile: DestinationProfile) -> str:
    lines = [
        f"== {profile.name} ==",
        profile.description,
        "",
        "Flight Information",
        f"  Round Trip Duration: {profile.flight_duration}",
        f"  Average Cost: {profile.flight_cost}",
        f"  Major Airports: {profile.airports}",
        "",
        "Accommodation",
        f"  Budget: {profile.budget_rate}",
        f"  Mid-Range: {profile.mid_range_rate}",
        f"  Luxury: {profile.luxury_rate}",
    ]
    for hotel in profile.hotel_recommendations:
        lines.append(f"  - {hotel}")

    if profile.activities:
        lines += ["", "Activities & Experiences"]
        for activity in profile.activities:
            lines.append(f"  {activity.name} | {activity.cost} | {activity.duration}")
            if activity.description:
                lines.append(f"    {activity.description}")

    if profile.food_and_dining is not None:
        lines += [
            "",
            "Food & Dining",
            f"  Average Meal Cost: {profile.food_and_dining.average_meal_cost}",
            f"  Must-Try Dishes: {', '.join(profile.food_and_dining.must_try_dishes)}",
        ]

    lines += [
        "",
        f"Estimated Total Cost ({profile.trip_days} days): "
        f"{format_cost(profile.estimated_total_cost)}",
    ]
    return "\n".join(lines)


async def run(args: argparse.Namespace) -> int:
    config = load_config()
    if args.base_url:
        config.base_url = args.base_url

    form = {
        name: getattr(args, name)
        for name in (
            "startingCity",
            "startDate",
            "endDate",
            "flightBudget",
            "hotelBudget",
            "activitiesBudget",
            "vacationType",
            "numberOfPeople",
        )
    }
    query = normalize_query(encode_search_form(form))

    async with ServiceClient(config) as service:
        view = DestinationsView(DiscoveryClient(service), DetailClient(service))
        state = await view.mount(query)

        if view.screen() == "error":
            print(f"Oops! Something went wrong: {state['error_message']}", file=sys.stderr)
            return 1

        print("Top Destinations for You\n")
        for index, card in enumerate(view.cards(), start=1):
            print(format_card(index, card))
            print()

        if args.select:
            state = await view.select(args.select)
            if state["detail_open"] and state["selected_detail"] is not None:
                print(format_profile(state["selected_detail"]))
            else:
                print(f"Could not load details: {state['detail_error']}", file=sys.stderr)
                return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, json_logs=args.json_logs, log_file=args.log_file)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
