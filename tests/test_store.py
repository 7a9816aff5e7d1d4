"""Tests for the OpportunityStore."""

import pytest

from pathfinder.models import OpportunityType
from pathfinder.store import SEED_OPPORTUNITIES, OpportunityStore


class TestSeededStore:
    """The default store built from the seed table."""

    def test_lists_six_records(self, store: OpportunityStore) -> None:
        ops = store.list_opportunities()
        assert len(ops) == 6
        assert [op.id for op in ops] == [1, 2, 3, 4, 5, 6]

    def test_first_record_is_competition(self, store: OpportunityStore) -> None:
        first = store.list_opportunities()[0]
        assert first.id == 1
        assert first.type is OpportunityType.COMPETITION
        assert first.title == "Google Code Jam 2025"

    def test_repeated_calls_identical(self, store: OpportunityStore) -> None:
        assert store.list_opportunities() == store.list_opportunities()
        assert OpportunityStore().list_opportunities() == store.list_opportunities()

    def test_keywords_are_lowercase(self, store: OpportunityStore) -> None:
        for op in store:
            assert all(kw == kw.lower() for kw in op.keywords)

    def test_returned_sequence_is_immutable(self, store: OpportunityStore) -> None:
        assert isinstance(store.list_opportunities(), tuple)
        assert isinstance(SEED_OPPORTUNITIES, tuple)


class TestByType:
    def test_internships_in_store_order(self, store: OpportunityStore) -> None:
        ops = store.by_type(OpportunityType.INTERNSHIP)
        assert [op.id for op in ops] == [2, 5]

    def test_single_category(self, store: OpportunityStore) -> None:
        ops = store.by_type(OpportunityType.COMMUNITY_SERVICE)
        assert [op.title for op in ops] == ["Local Park Cleanup"]

    def test_count_by_type_includes_every_category(self, make_opportunity) -> None:
        store = OpportunityStore([make_opportunity(1, op_type=OpportunityType.WEBINAR)])
        counts = store.count_by_type()
        assert counts["Webinar"] == 1
        assert counts["Competition"] == 0
        assert len(counts) == len(OpportunityType)


class TestValidation:
    """Construction-time checks on ids."""

    def test_duplicate_id_rejected(self, make_opportunity) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            OpportunityStore([make_opportunity(1), make_opportunity(1)])

    def test_non_positive_id_rejected(self, make_opportunity) -> None:
        with pytest.raises(ValueError, match="positive"):
            OpportunityStore([make_opportunity(0)])

    def test_empty_store(self) -> None:
        store = OpportunityStore([])
        assert len(store) == 0
        assert store.list_opportunities() == ()
