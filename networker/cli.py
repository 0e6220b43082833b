"""
Meetup Networker

Looks up LinkedIn profiles for a list of event attendees, flags target
contacts, and optionally primes LinkedIn connection requests in Chrome.
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
import uuid
from pathlib import Path
from typing import List, Optional

from networker.automation.linkedin_connect import LinkedInConnector
from networker.config.settings import ConfigurationError, Settings, get_settings
from networker.db.file_store import FileProfileStore
from networker.db.repos.profile_cache import ProfileCache
from networker.pipelines.batch import BatchCoordinator
from networker.ports.profile_api import ProfileApiPort
from networker.services.enricher import ProfileEnricher
from networker.services.event_parser import parse_event_from_file_name
from networker.services.name_parser import parse_name_list
from networker.services.reporting import format_balance, format_cost, print_results, print_summary
from networker.services.summarizer import SummaryCondenser
from networker.sources.enrichlayer import EnrichLayerClient
from networker.utils.logging_setup import init_logging, set_log_event


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="meetup-networker",
        description="Look up LinkedIn profiles for a list of names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  meetup-networker "Tech Networking Mixer on 3-15-25.txt"
  meetup-networker names.txt --batch-size 5 --city "New York"
  meetup-networker names.txt --connect
        """,
    )
    parser.add_argument("file", help="Path to file containing list of names (one per line)")
    parser.add_argument("--batch-size", "-b", type=int, default=None, help="Names to look up this run (default: BATCH_SIZE or 10)")
    parser.add_argument("--city", "-c", default=None, help="City to scope the person search (default: SEARCH_CITY)")
    parser.add_argument("--connect", action="store_true", help="Open target contacts in Chrome and click Connect (macOS)")
    parser.add_argument(
        "--log-level", "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (default: from settings)",
    )
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.batch_size is not None:
        overrides["batch_size"] = args.batch_size
    if args.city:
        overrides["search_city"] = args.city
    return dataclasses.replace(settings, **overrides) if overrides else settings


def build_coordinator(settings: Settings, api: ProfileApiPort) -> BatchCoordinator:
    cache = ProfileCache(FileProfileStore(settings.cache_dir), cross_event_lookup=settings.cache_cross_event_lookup)
    condenser = SummaryCondenser(settings=settings) if settings.ai_enabled else None
    enricher = ProfileEnricher.from_settings(settings, api=api, cache=cache, condenser=condenser)
    return BatchCoordinator(enricher, cache, batch_size=settings.batch_size)


def run(args: argparse.Namespace, settings: Settings) -> int:
    event = parse_event_from_file_name(args.file)
    set_log_event(event.event_name)
    print(f"Event: {event.event_name}")
    print(f"Reading names from: {args.file}\n")

    names = parse_name_list(Path(args.file).read_text(encoding="utf-8"))
    print(f"Found {len(names)} names\n")

    api = EnrichLayerClient(settings)
    coordinator = build_coordinator(settings, api)

    print("Checking credit balance...")
    before = api.get_credit_balance()
    print(format_balance("before", before) + "\n")

    print("Looking up LinkedIn profiles...\n")
    ctx = coordinator.run(args.file, event.event_name, names=names)

    print("\nChecking credit balance...")
    after = api.get_credit_balance()
    print(format_balance("after", after))
    print(f"\n{format_cost(before, after)}\n")

    print_results(event.event_name, ctx.profiles)
    print(f"Successfully processed {len(ctx.profiles)} profiles")
    print_summary(event.event_name, ctx.meta, before, after)

    if args.connect:
        targets = [p for p in ctx.profiles if p.is_target_contact and not p.error and p.linkedin_url]
        if not targets:
            print("No target contacts to connect with")
        else:
            print(f"\nOpening {len(targets)} target contacts in Chrome...")
            primed = LinkedInConnector.from_settings(settings).connect_all(targets)
            print(f"Primed {primed} of {len(targets)} connection requests")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = apply_overrides(get_settings(), args)
        init_logging(args.log_level or settings.log_level)
        if not os.getenv("RUN_ID"):
            os.environ["RUN_ID"] = uuid.uuid4().hex
        return run(args, settings)
    except KeyboardInterrupt:
        logging.info("Process interrupted by user")
        return 130
    except (OSError, UnicodeDecodeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        logging.debug("Full traceback:", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
