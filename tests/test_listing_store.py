"""Tests for ListingStore mutations and the make/model invariant."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lotgrid.models import Listing, ReferenceData
from lotgrid.state import ListingNotFoundError, ListingStore, UnknownFieldError
from lotgrid.summary import total

REFERENCE = ReferenceData(
    make_options=("A", "B", "C"),
    models_by_make={"A": ("x", "z"), "B": ("y",), "C": ()},
)


def _as_tuple(listing):
    return (listing.id, listing.make, listing.model, listing.price)


class TestAdd:
    def test_first_id_is_one_on_empty_store(self, reference):
        store = ListingStore(reference)
        listing = store.add()
        assert listing.id == 1

    def test_seeded_from_first_make_and_model(self, reference):
        listing = ListingStore(reference).add()
        assert (listing.make, listing.model, listing.price) == ("A", "x", 0)

    def test_inserted_at_head(self, store):
        listing = store.add()
        assert listing.id == 3
        assert [row.id for row in store.snapshot()] == [3, 1, 2]

    def test_id_follows_max_not_count(self, reference):
        store = ListingStore(reference, [Listing(id=7, make="A", model="x")])
        assert store.add().id == 8

    def test_first_make_without_models_gets_empty_model(self):
        reference = ReferenceData(make_options=("C",), models_by_make={})
        assert ListingStore(reference).add().model == ""


class TestRemove:
    def test_remove_scenario(self, store):
        store.remove({1})
        assert [_as_tuple(row) for row in store.snapshot()] == [(2, "B", "y", 20)]
        assert total(store.snapshot()) == 20

    def test_unknown_ids_are_ignored(self, store):
        store.remove({99})
        assert len(store) == 2

    def test_remove_several(self, store):
        store.add()
        store.remove([1, 3])
        assert store.ids() == {2}

    def test_removed_id_is_not_reused_while_higher_ids_exist(self, store):
        store.remove({1})
        assert store.add().id == 3


class TestUpdateField:
    def test_make_change_resets_model_to_first(self, store):
        updated = store.update_field(2, "make", "A")
        assert _as_tuple(updated) == (2, "A", "x", 20)
        assert store.get(2) == updated

    def test_make_change_resets_even_when_old_model_still_valid(self, reference):
        store = ListingStore(reference, [Listing(id=1, make="A", model="z", price=0)])
        updated = store.update_field(1, "make", "A")
        assert updated.model == "x"

    def test_make_without_models_clears_model(self, store):
        assert store.update_field(1, "make", "C").model == ""

    def test_unknown_make_clears_model(self, store):
        updated = store.update_field(1, "make", "Unknown")
        assert (updated.make, updated.model) == ("Unknown", "")

    def test_valid_model_is_written(self, store):
        assert store.update_field(1, "model", "z").model == "z"

    def test_invalid_model_falls_back_to_first(self, store):
        store.update_field(1, "model", "z")
        assert store.update_field(1, "model", "y").model == "x"

    def test_price_is_parsed(self, store):
        assert store.update_field(1, "price", "1,234,000원").price == 1234000

    def test_unparseable_price_becomes_zero(self, store):
        assert store.update_field(1, "price", "abc").price == 0

    def test_numeric_price_passes_through(self, store):
        assert store.update_field(1, "price", 42.5).price == 42.5

    def test_non_finite_price_becomes_zero(self, store):
        assert store.update_field(1, "price", float("inf")).price == 0

    def test_oversized_int_price_becomes_zero(self, store):
        assert store.update_field(1, "price", 10**400).price == 0

    def test_boolean_price_is_parsed_as_text(self, store):
        assert store.update_field(1, "price", True).price == 0

    def test_price_update_keeps_other_fields(self, store):
        updated = store.update_field(2, "price", "5")
        assert _as_tuple(updated) == (2, "B", "y", 5)

    def test_unknown_id_raises_and_leaves_store_unchanged(self, store):
        before = store.snapshot()
        with pytest.raises(ListingNotFoundError) as excinfo:
            store.update_field(99, "price", "5")
        assert excinfo.value.listing_id == 99
        assert store.snapshot() == before

    @pytest.mark.parametrize("field", ["id", "color", ""])
    def test_non_editable_field_raises(self, store, field):
        before = store.snapshot()
        with pytest.raises(UnknownFieldError):
            store.update_field(1, field, "3")
        assert store.snapshot() == before

    def test_update_keeps_position(self, store):
        store.update_field(2, "make", "A")
        assert [row.id for row in store.snapshot()] == [1, 2]


class TestSeedListings:
    def test_invalid_seed_model_is_reset(self, reference):
        store = ListingStore(reference, [Listing(id=1, make="B", model="x")])
        assert store.get(1).model == "y"

    def test_duplicate_seed_ids_rejected(self, reference):
        with pytest.raises(ValueError):
            ListingStore(
                reference,
                [Listing(id=1, make="A", model="x"), Listing(id=1, make="B", model="y")],
            )

    def test_snapshot_is_a_copy(self, store):
        snap = store.snapshot()
        store.add()
        assert len(snap) == 2


# =============================================================================
# PROPERTY TESTS
# =============================================================================

operations = st.lists(
    st.one_of(
        st.tuples(st.just("add")),
        st.tuples(st.just("remove"), st.sets(st.integers(min_value=0, max_value=12), max_size=3)),
        st.tuples(
            st.just("update"),
            st.integers(min_value=0, max_value=12),
            st.sampled_from(["make", "model", "price"]),
            st.one_of(
                st.sampled_from(["A", "B", "C", "D", "x", "y", "z", ""]),
                st.text(max_size=8),
            ),
        ),
    ),
    max_size=40,
)


def _assert_invariant(store):
    for listing in store.snapshot():
        models = REFERENCE.models_for(listing.make)
        if models:
            assert listing.model in models
        else:
            assert listing.model == ""


@settings(max_examples=200, deadline=None)
@given(operations)
def test_make_model_invariant_holds_after_every_mutation(ops):
    store = ListingStore(REFERENCE)
    for op in ops:
        if op[0] == "add":
            existing = store.ids()
            listing = store.add()
            assert all(listing.id > i for i in existing)
        elif op[0] == "remove":
            store.remove(op[1])
            assert not store.ids() & op[1]
        else:
            _, listing_id, field, value = op
            try:
                store.update_field(listing_id, field, value)
            except ListingNotFoundError:
                assert listing_id not in store.ids()
        _assert_invariant(store)


@settings(max_examples=100, deadline=None)
@given(st.lists(st.integers(min_value=1, max_value=500), max_size=20, unique=True))
def test_add_allocates_above_every_existing_id(ids):
    store = ListingStore(REFERENCE, [Listing(id=i, make="A", model="x") for i in ids])
    assert store.add().id == max(ids, default=0) + 1
