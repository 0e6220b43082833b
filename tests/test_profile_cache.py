from __future__ import annotations

import json
import logging

from networker.db.file_store import FileProfileStore
from networker.db.memory_store import InMemoryProfileStore
from networker.db.repos.profile_cache import ProfileCache, get_cache_key, normalize_event
from networker.models import ProfileRecord


def _record(name="Jane Roe", title="General Partner", company="Acme Capital"):
    return ProfileRecord(
        name=name,
        first_name=name.split()[0],
        current_title=title,
        current_company=company,
        location="San Francisco, CA",
        linkedin_url="https://www.linkedin.com/in/janeroe",
        is_target_contact=True,
    )


def test_cache_key_is_case_and_punctuation_insensitive():
    assert get_cache_key("John", "Doe") == "john-doe"
    assert get_cache_key("JOHN", "doe") == get_cache_key("john", "DOE")
    assert get_cache_key("Mary Ann", "O'Neil") == "mary-ann-o-neil"
    assert get_cache_key("José", "Núñez") == "jos-n-ez"


def test_cache_key_normalization_is_idempotent():
    key = get_cache_key("Anne--Marie", "De La Cruz")
    assert get_cache_key(*key.split("-", 1)) == key
    assert normalize_event(normalize_event("Tech Mixer on 3/15/25")) == "tech-mixer-on-3-15-25"


def test_put_then_get_round_trips_and_stamps_file(tmp_path):
    cache = ProfileCache(FileProfileStore(tmp_path))
    record = _record()
    cache.put("Jane", "Roe", record, "Tech Mixer on 3-15-25")

    assert cache.get("jane", "ROE", "Tech Mixer on 3-15-25") == record

    path = tmp_path / "tech-mixer-on-3-15-25" / "jane-roe.json"
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["currentTitle"] == "General Partner"
    assert payload["isTargetContact"] is True
    assert payload["cachedAt"].endswith("Z")
    assert "condensedSummary" not in payload


def test_get_missing_returns_none(tmp_path):
    cache = ProfileCache(FileProfileStore(tmp_path))
    assert cache.get("No", "Body", "Some Event") is None
    # Lookups prepare the event directory
    assert (tmp_path / "some-event").is_dir()


def test_cross_event_fallback_reads_other_events(tmp_path):
    cache = ProfileCache(FileProfileStore(tmp_path))
    record = _record()
    cache.put("Jane", "Roe", record, "Event A")

    assert cache.get("Jane", "Roe", "Event B") == record


def test_write_under_other_event_does_not_leak_back(tmp_path):
    cache = ProfileCache(FileProfileStore(tmp_path))
    original = _record(title="Partner")
    cache.put("Jane", "Roe", original, "Event A")

    updated = _record(title="Managing Director")
    cache.put("Jane", "Roe", updated, "Event B")

    assert cache.get("Jane", "Roe", "Event A") == original
    assert cache.get("Jane", "Roe", "Event B") == updated


def test_cross_event_lookup_can_be_disabled(tmp_path):
    cache = ProfileCache(FileProfileStore(tmp_path), cross_event_lookup=False)
    cache.put("Jane", "Roe", _record(), "Event A")
    assert cache.get("Jane", "Roe", "Event B") is None


def test_not_found_sentinel_is_cached(tmp_path):
    cache = ProfileCache(FileProfileStore(tmp_path))
    cache.put("Ghost", "Person", ProfileRecord.not_found("Ghost Person"), "Event A")

    hit = cache.get("Ghost", "Person", "Event A")
    assert hit is not None and hit.is_not_found


def test_corrupt_record_is_a_miss_with_warning(tmp_path, caplog):
    cache = ProfileCache(FileProfileStore(tmp_path))
    cache.put("Jane", "Roe", _record(), "Event B")
    bad = tmp_path / "event-a" / "jane-roe.json"
    bad.parent.mkdir(parents=True)
    bad.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert cache.get("Jane", "Roe", "Event A") is None
    assert "Could not read cache" in caplog.text


def test_record_failing_validation_is_a_miss(tmp_path):
    cache = ProfileCache(FileProfileStore(tmp_path))
    bad = tmp_path / "event-a" / "jane-roe.json"
    bad.parent.mkdir(parents=True)
    bad.write_text(json.dumps({"currentTitle": "CEO"}), encoding="utf-8")

    assert cache.get("Jane", "Roe", "Event A") is None


def test_corrupt_entries_in_other_events_are_skipped(tmp_path):
    cache = ProfileCache(FileProfileStore(tmp_path))
    bad = tmp_path / "event-a" / "jane-roe.json"
    bad.parent.mkdir(parents=True)
    bad.write_text("[]", encoding="utf-8")
    assert cache.get("Jane", "Roe", "Event B") is None


def test_load_all_skips_bad_entries(tmp_path, caplog):
    cache = ProfileCache(FileProfileStore(tmp_path))
    cache.put("Jane", "Roe", _record("Jane Roe"), "Event A")
    cache.put("John", "Doe", ProfileRecord.not_found("John Doe"), "Event A")
    (tmp_path / "event-a" / "broken.json").write_text("{", encoding="utf-8")
    (tmp_path / "event-a" / "notes.txt").write_text("ignored", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        records = cache.load_all("Event A")

    assert sorted(r.name for r in records) == ["Jane Roe", "John Doe"]
    assert "Skipping unreadable cache entry" in caplog.text
    assert cache.load_all("Never Seen") == []


def test_divergent_cross_event_hits_warn_and_pick_first(caplog):
    cache = ProfileCache(InMemoryProfileStore())
    first = _record(title="Partner")
    second = _record(title="Principal")
    cache.put("Jane", "Roe", first, "Event A")
    cache.put("Jane", "Roe", second, "Event B")

    with caplog.at_level(logging.WARNING):
        hit = cache.get("Jane", "Roe", "Event C")

    assert hit == first
    assert "differing data" in caplog.text


def test_identical_cross_event_hits_do_not_warn(caplog):
    cache = ProfileCache(InMemoryProfileStore())
    cache.put("Jane", "Roe", _record(), "Event A")
    cache.put("Jane", "Roe", _record(), "Event B")

    with caplog.at_level(logging.WARNING):
        assert cache.get("Jane", "Roe", "Event C") == _record()
    assert "differing data" not in caplog.text


class _FaultyStore(InMemoryProfileStore):
    def write(self, namespace, key, payload):
        from networker.ports.cache_store import CacheFault
        return CacheFault(f"{namespace}/{key}", "disk full")


def test_write_fault_is_logged_not_raised(caplog):
    cache = ProfileCache(_FaultyStore())
    with caplog.at_level(logging.WARNING):
        cache.put("Jane", "Roe", _record(), "Event A")
    assert "disk full" in caplog.text
    assert cache.get("Jane", "Roe", "Event A") is None


def test_legacy_fields_in_cache_files_are_ignored(tmp_path):
    cache = ProfileCache(FileProfileStore(tmp_path))
    path = tmp_path / "event-a" / "jane-roe.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"name": "Jane Roe", "domain": "fintech", "cachedAt": "2025-03-15T18:00:00.000Z"}), encoding="utf-8")

    record = cache.get("Jane", "Roe", "Event A")
    assert record == ProfileRecord(name="Jane Roe")
    assert "domain" not in record.to_cache_payload()
