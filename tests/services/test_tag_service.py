"""Tests for tag frecency scoring and ordering."""
from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.tag import Tag
from services.tag_service import calculate_frecency, get_or_create_tag, get_tags_by_frecency
from services.url_service import save_url


class TestCalculateFrecency:
    """Tests for the frecency formula."""

    def test__calculate_frecency__no_elapsed_time(self) -> None:
        """With zero elapsed time the score is frequency * 10."""
        now = datetime(2025, 1, 1, tzinfo=UTC)
        assert calculate_frecency(1, now, now=now) == pytest.approx(10.0)
        assert calculate_frecency(3, now, now=now) == pytest.approx(30.0)

    def test__calculate_frecency__halves_after_seven_days(self) -> None:
        """After seven days the decay factor is 1/2."""
        last_used = datetime(2025, 1, 1, tzinfo=UTC)
        now = last_used + timedelta(days=7)
        assert calculate_frecency(2, last_used, now=now) == pytest.approx(10.0)

    def test__calculate_frecency__decreases_with_age(self) -> None:
        """Older last use gives a lower, still positive, score."""
        now = datetime(2025, 6, 1, tzinfo=UTC)
        scores = [
            calculate_frecency(1, now - timedelta(days=days), now=now)
            for days in (0, 1, 30, 3650)
        ]
        assert scores == sorted(scores, reverse=True)
        assert len(set(scores)) == len(scores)
        assert scores[-1] > 0

    def test__calculate_frecency__increases_with_frequency(self) -> None:
        """More uses give a higher score at the same recency."""
        now = datetime(2025, 6, 1, tzinfo=UTC)
        last_used = now - timedelta(days=3)
        assert calculate_frecency(2, last_used, now=now) > calculate_frecency(1, last_used, now=now)

    def test__calculate_frecency__future_last_used_counts_as_now(self) -> None:
        """A last_used after now is clamped to zero elapsed days."""
        now = datetime(2025, 1, 1, tzinfo=UTC)
        future = now + timedelta(days=2)
        assert calculate_frecency(1, future, now=now) == pytest.approx(10.0)

    def test__calculate_frecency__defaults_to_wall_clock(self) -> None:
        """Without now, the current time is used."""
        last_used = datetime.now(UTC) - timedelta(days=7)
        assert calculate_frecency(1, last_used) == pytest.approx(5.0, rel=1e-3)


class TestGetOrCreateTag:
    """Tests for get_or_create_tag."""

    async def test__get_or_create_tag__creates_new_tag(self, db_session: AsyncSession) -> None:
        """A new tag starts with frequency 1 and all timestamps at the write time."""
        timestamp = datetime(2025, 1, 1, tzinfo=UTC)
        tag_id = await get_or_create_tag(db_session, "python", timestamp)

        tag = await db_session.get(Tag, tag_id)
        assert tag is not None
        assert tag.name == "python"
        assert tag.frequency == 1
        assert tag.last_used == timestamp
        assert tag.created_at == timestamp
        assert tag.updated_at == timestamp
        assert tag.frecency_score == pytest.approx(10.0)

    async def test__get_or_create_tag__existing_tag_is_reused(
        self, db_session: AsyncSession,
    ) -> None:
        """Using a tag again increments frequency and refreshes recency."""
        first = datetime(2025, 1, 1, tzinfo=UTC)
        second = first + timedelta(days=10)

        id1 = await get_or_create_tag(db_session, "python", first)
        id2 = await get_or_create_tag(db_session, "python", second)
        assert id1 == id2

        tag = await db_session.get(Tag, id1)
        assert tag is not None
        assert tag.frequency == 2
        assert tag.last_used == second
        assert tag.updated_at == second
        assert tag.created_at == first
        assert tag.frecency_score == pytest.approx(20.0)

    async def test__get_or_create_tag__names_are_case_sensitive(
        self, db_session: AsyncSession,
    ) -> None:
        """Tag names are matched exactly."""
        timestamp = datetime(2025, 1, 1, tzinfo=UTC)
        id1 = await get_or_create_tag(db_session, "Python", timestamp)
        id2 = await get_or_create_tag(db_session, "python", timestamp)
        assert id1 != id2


class TestGetTagsByFrecency:
    """Tests for get_tags_by_frecency."""

    async def test__get_tags_by_frecency__empty(self, db_session: AsyncSession) -> None:
        """No tags returns an empty list."""
        assert await get_tags_by_frecency(db_session) == []

    async def test__get_tags_by_frecency__sorted_by_score(self, db_session: AsyncSession) -> None:
        """More frequently used tags sort first."""
        await save_url(db_session, "https://example1.com", ["rare"])
        await save_url(db_session, "https://example2.com", ["common"])
        await save_url(db_session, "https://example3.com", ["common"])
        await save_url(db_session, "https://example4.com", ["common"])

        tags = await get_tags_by_frecency(db_session)
        assert [t.name for t in tags] == ["common", "rare"]
        assert tags[0].frequency == 3
        assert tags[1].frequency == 1

    async def test__get_tags_by_frecency__scores_positive(self, db_session: AsyncSession) -> None:
        """Every used tag has a strictly positive score."""
        await save_url(db_session, "https://example.com", ["test", "other"])
        tags = await get_tags_by_frecency(db_session)
        assert all(t.frecency_score > 0 for t in tags)

    async def test__get_tags_by_frecency__ties_keep_insertion_order(
        self, db_session: AsyncSession,
    ) -> None:
        """Tags with equal scores are returned in the order they were created."""
        await save_url(db_session, "https://example.com", ["zebra", "apple", "banana"])
        tags = await get_tags_by_frecency(db_session)
        assert [t.name for t in tags] == ["zebra", "apple", "banana"]

    async def test__get_tags_by_frecency__uses_stored_scores(
        self, db_session: AsyncSession,
    ) -> None:
        """Ordering uses the score stored at the last write, not a fresh decay."""
        old = datetime(2020, 1, 1, tzinfo=UTC)
        recent = datetime(2025, 1, 1, tzinfo=UTC)
        await get_or_create_tag(db_session, "old-but-frequent", old)
        await get_or_create_tag(db_session, "old-but-frequent", old)
        await get_or_create_tag(db_session, "recent", recent)

        tags = await get_tags_by_frecency(db_session)
        assert [t.name for t in tags] == ["old-but-frequent", "recent"]

        stored = await db_session.scalar(
            select(Tag.frecency_score).where(Tag.name == "old-but-frequent"),
        )
        assert stored == pytest.approx(20.0)
