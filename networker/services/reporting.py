from __future__ import annotations

from typing import Iterable, Optional

from networker.models import ProfileRecord


def format_balance(label: str, balance: Optional[float]) -> str:
    if balance is None:
        return "Unable to fetch credit balance"
    return f"Credit balance {label}: {balance:g} credits"


def format_cost(before: Optional[float], after: Optional[float]) -> str:
    if before is None or after is None:
        return "Cost: Unable to calculate (credit balance unavailable)"
    return f"Cost: {before - after:g} credits used"


def print_results(event_name: str, profiles: Iterable[ProfileRecord]) -> int:
    """Print numbered results; returns how many profiles were listed."""
    print(f"=== {event_name} - Results ===\n")
    count = 0
    for index, profile in enumerate(profiles, start=1):
        count = index
        marker = " ⭐" if profile.is_target_contact else ""
        print(f"{index}. {profile.name}{marker}")
        if profile.error:
            print(f"   Error: {profile.error}")
        else:
            print(f"   Job Title: {profile.current_title or 'N/A'}")
            print(f"   Company: {profile.current_company or 'N/A'}")
            print(f"   Location: {profile.location or 'N/A'}")
            if profile.condensed_summary:
                print(f"   Summary: {profile.condensed_summary}")
            if profile.linkedin_url:
                print(f"   LinkedIn: {profile.linkedin_url}")
        print("")
    return count


def print_summary(event_name: str, meta: dict, before: Optional[float], after: Optional[float]) -> None:
    print("\n" + "=" * 60)
    print(f"MEETUP NETWORKER - {event_name}")
    print("=" * 60)
    print(f"Names in file: {meta.get('names_total', 0)}")
    if meta.get("mode") == "cached":
        print(f"Cached target contacts: {meta.get('cached_targets', 0)}")
    else:
        print(f"Processed this run: {meta.get('profiles_enriched', 0)}")
        print(f"Failed lookups (retried next run): {meta.get('profiles_failed', 0)}")
        print(f"Remaining in file: {meta.get('remaining', 0)}")
    print(format_balance("before", before))
    print(format_balance("after", after))
    print(format_cost(before, after))
    print("=" * 60)
