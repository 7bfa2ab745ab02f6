"""
Tests for snapshot entries, timelines, and the timeline generator.

Test Coverage:
    - Entry projection and the non-empty types rule
    - Timeline ordering validation
    - generate(): count, spacing, preconditions, statelessness
    - Placeholder fallback and read-through of newly loaded records
    - REPEAT vs ROTATE content modes
"""

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError

from dex.timeline.generator import TimelineGenerator
from dex.timeline.models import ContentMode, ReloadPolicy, SnapshotEntry, Timeline
from dex.timeline.placeholders import alternate_placeholder, placeholder


class TestSnapshotEntry:
    """Tests for SnapshotEntry."""

    def test_from_record(self, sample_record, now):
        entry = SnapshotEntry.from_record(sample_record, now)
        assert entry.timestamp == now
        assert entry.name == "bulbasaur"
        assert entry.categories == ["grass", "poison"]
        assert entry.image_reference == "bulbasaur.png"

    def test_rejects_empty_types(self, now):
        with pytest.raises(ValidationError):
            SnapshotEntry(timestamp=now, name="missingno", types=(), image_reference="x.png")

    def test_is_immutable(self, sample_record, now):
        entry = SnapshotEntry.from_record(sample_record, now)
        with pytest.raises(ValidationError):
            entry.name = "ivysaur"

    def test_content_excludes_timestamp(self, sample_record, now, hour):
        a = SnapshotEntry.from_record(sample_record, now)
        b = SnapshotEntry.from_record(sample_record, now + hour)
        assert a != b
        assert a.content() == b.content()


class TestPlaceholders:
    """Built-in placeholder entries."""

    def test_placeholder_is_bulbasaur(self, now):
        entry = placeholder(now)
        assert entry.timestamp == now
        assert entry.name == "bulbasaur"
        assert entry.categories == ["grass", "poison"]
        assert entry.image_reference == "bulbasaur.png"

    def test_placeholder_samples_now(self):
        before = datetime.now(timezone.utc)
        entry = placeholder()
        assert entry.timestamp >= before

    def test_alternate_placeholder(self, now):
        entry = alternate_placeholder(now)
        assert entry.name == "mew"
        assert entry.categories == ["psychic"]

    @pytest.mark.parametrize("factory", [placeholder, alternate_placeholder])
    def test_placeholders_have_types(self, factory):
        assert len(factory().types) >= 1


class TestTimeline:
    """Tests for the Timeline model."""

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            Timeline(entries=())

    def test_rejects_out_of_order(self, now, hour):
        with pytest.raises(ValidationError):
            Timeline(entries=(placeholder(now + hour), placeholder(now)))

    def test_rejects_duplicate_timestamps(self, now):
        with pytest.raises(ValidationError):
            Timeline(entries=(placeholder(now), placeholder(now)))

    def test_default_policy(self, now):
        assert Timeline(entries=(placeholder(now),)).policy == ReloadPolicy.AT_END

    def test_expires_at_and_entry_at(self, now, hour):
        timeline = Timeline(entries=(placeholder(now), alternate_placeholder(now + hour)))
        assert timeline.first.name == "bulbasaur"
        assert timeline.expires_at == now + hour
        assert timeline.entry_at(now - hour).name == "bulbasaur"
        assert timeline.entry_at(now + timedelta(minutes=30)).name == "bulbasaur"
        assert timeline.entry_at(now + hour).name == "mew"
        assert timeline.entry_at(now + 5 * hour).name == "mew"


class TestGenerate:
    """Tests for TimelineGenerator.generate."""

    @pytest.mark.parametrize("count", [1, 2, 5, 24])
    @pytest.mark.parametrize("interval", [
        timedelta(seconds=1),
        timedelta(minutes=15),
        timedelta(hours=1),
        timedelta(days=1),
    ])
    def test_count_and_spacing(self, now, count, interval):
        timeline = TimelineGenerator().generate(now, count, interval)

        assert len(timeline.entries) == count
        assert timeline.entries[0].timestamp == now
        for i, entry in enumerate(timeline.entries):
            assert entry.timestamp == now + i * interval
        assert timeline.policy == ReloadPolicy.AT_END

    @pytest.mark.parametrize("count", [0, -1])
    def test_rejects_bad_count(self, now, hour, count):
        with pytest.raises(ValueError):
            TimelineGenerator().generate(now, count, hour)

    @pytest.mark.parametrize("interval", [timedelta(0), timedelta(hours=-1)])
    def test_rejects_bad_interval(self, now, interval):
        with pytest.raises(ValueError):
            TimelineGenerator().generate(now, 5, interval)

    def test_without_store_uses_placeholder(self, now, hour):
        timeline = TimelineGenerator().generate(now, 3, hour)
        assert all(e.name == "bulbasaur" for e in timeline.entries)

    def test_empty_store_uses_placeholder(self, memory_store, now, hour):
        timeline = TimelineGenerator(memory_store).generate(now, 5, hour)
        assert [e.categories for e in timeline.entries] == [["grass", "poison"]] * 5

    def test_custom_placeholder_factory(self, now, hour):
        generator = TimelineGenerator(placeholder_factory=alternate_placeholder)
        assert generator.placeholder(now).name == "mew"
        assert generator.generate(now, 2, hour).first.name == "mew"

    def test_scenario_bulbasaur(self, memory_store, sample_record, now, hour):
        memory_store.insert(sample_record)
        timeline = TimelineGenerator(memory_store).generate(now, 5, hour)

        assert [e.timestamp for e in timeline.entries] == [now + i * hour for i in range(5)]
        assert all(e.categories == ["grass", "poison"] for e in timeline.entries)

    def test_stateless(self, memory_store, sample_record, now, hour):
        memory_store.insert(sample_record)
        generator = TimelineGenerator(memory_store)
        assert generator.generate(now, 5, hour) == generator.generate(now, 5, hour)

    def test_reads_through_latest_record(self, memory_store, other_record, now, hour):
        generator = TimelineGenerator(memory_store)
        before = generator.generate(now, 2, hour)
        memory_store.insert(other_record)
        after = generator.generate(now, 2, hour)

        assert before.first.name == "bulbasaur"
        assert all(e.name == "charmander" for e in after.entries)

    def test_entries_do_not_share_state_with_record(self, memory_store, sample_record, now, hour):
        memory_store.insert(sample_record)
        timeline = TimelineGenerator(memory_store).generate(now, 2, hour)
        memory_store.clear()
        assert timeline.first.name == "bulbasaur"

    def test_generated_entries_always_have_types(self, memory_store, other_record, now, hour):
        generator = TimelineGenerator(memory_store)
        assert all(e.types for e in generator.generate(now, 3, hour).entries)
        memory_store.insert(other_record)
        assert all(e.types for e in generator.generate(now, 3, hour).entries)


class TestContentModes:
    """REPEAT and ROTATE content policies."""

    def test_repeat_uses_latest(self, memory_store, sample_record, other_record, now, hour):
        memory_store.insert(sample_record)
        memory_store.insert(other_record)
        timeline = TimelineGenerator(memory_store).generate(now, 4, hour)
        assert {e.name for e in timeline.entries} == {"charmander"}

    def test_rotate_cycles_records(self, memory_store, sample_record, other_record, now, hour):
        memory_store.insert(sample_record)
        memory_store.insert(other_record)
        generator = TimelineGenerator(memory_store, content_mode=ContentMode.ROTATE)
        timeline = generator.generate(now, 5, hour)
        assert [e.name for e in timeline.entries] == [
            "bulbasaur", "charmander", "bulbasaur", "charmander", "bulbasaur",
        ]

    def test_rotate_single_record_matches_repeat(self, memory_store, sample_record, now, hour):
        memory_store.insert(sample_record)
        rotate = TimelineGenerator(memory_store, content_mode=ContentMode.ROTATE)
        repeat = TimelineGenerator(memory_store, content_mode=ContentMode.REPEAT)
        assert rotate.generate(now, 3, hour) == repeat.generate(now, 3, hour)

    def test_rotate_empty_store_uses_placeholder(self, memory_store, now, hour):
        generator = TimelineGenerator(memory_store, content_mode=ContentMode.ROTATE)
        assert generator.generate(now, 2, hour).first.name == "bulbasaur"
