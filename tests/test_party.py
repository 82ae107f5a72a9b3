"""Tests for chamber/party.py: party filter, names, colors."""
import pytest
from conftest import rep
from chamber.layout import compute_layout
from chamber.party import (
    ALL_PARTIES, party_key, party_color,
    filter_seats, filter_seats_by, filter_layout, party_counts,
)


class TestPartyKey:
    def test_casefold_and_trim(self):
        assert party_key("  Democrat ") == "democrat"
        assert party_key("REPUBLICAN") == "republican"

    def test_alias(self):
        assert party_key("Democratic") == party_key("democrat")

    def test_empty(self):
        assert party_key(None) == ""
        assert party_key("") == ""


class TestPartyColor:
    def test_known(self):
        assert party_color("Democrat") == "#3B82F6"
        assert party_color("republican") == "#EF4444"
        assert party_color("Independent") == "#10B981"

    def test_unknown(self):
        assert party_color("Green") == "#6B7280"
        assert party_color(None) == "#6B7280"


class TestFilterSeats:
    @pytest.mark.parametrize("party", ["Democrat", "Republican"])
    def test_only_requested_party(self, layout, party):
        kept = filter_seats(layout.seats, party)
        assert kept
        assert all(s.member.party == party for s in kept)

    def test_seats_unchanged(self, layout):
        originals = {s.seat_number: s for s in layout.seats}
        for s in filter_seats(layout.seats, "Republican"):
            o = originals[s.seat_number]
            assert (s.x, s.y, s.rotation_degrees) == (o.x, o.y, o.rotation_degrees)
            assert s is o

    def test_partition(self, layout):
        dem = filter_seats(layout.seats, "Democrat")
        rep_ = filter_seats(layout.seats, "Republican")
        assert len(dem) + len(rep_) == len(layout.seats)
        assert len(rep_) == 17

    def test_keeps_layout_order(self, layout):
        kept = filter_seats(layout.seats, "Democrat")
        numbers = [s.seat_number for s in kept]
        assert numbers == sorted(numbers)

    @pytest.mark.parametrize("party", [ALL_PARTIES, "ALL", None])
    def test_all_is_identity(self, layout, party):
        assert filter_seats(layout.seats, party) == layout.seats

    def test_case_insensitive(self, layout):
        assert filter_seats(layout.seats, "democrat") == filter_seats(layout.seats, "Democrat")

    def test_alias_matches(self):
        seats = compute_layout([rep(1, "Democratic"), rep(2, "Democrat"), rep(3, "Republican")]).seats
        assert [s.member.id for s in filter_seats(seats, "Democrat")] == [1, 2]

    def test_no_match(self, layout):
        assert filter_seats(layout.seats, "Whig") == []

    def test_predicate(self, layout):
        kept = filter_seats_by(layout.seats, lambda p: p.startswith("R"))
        assert kept == filter_seats(layout.seats, "Republican")


class TestFilterLayout:
    def test_specials_kept(self, layout):
        filtered = filter_layout(layout, "Republican")
        assert filtered.specials == layout.specials
        assert filtered.capacity == layout.capacity
        assert len(filtered.seats) == 17

    def test_original_untouched(self, layout):
        filter_layout(layout, "Republican")
        assert len(layout.seats) == 50


class TestPartyCounts:
    def test_sample(self, layout):
        assert party_counts(layout.seats) == {"democrat": 33, "republican": 17}

    def test_order_most_first(self):
        seats = compute_layout([rep(1, "Independent"), rep(2, "Green"), rep(3, "Green")]).seats
        assert list(party_counts(seats)) == ["green", "independent"]

    def test_empty(self):
        assert party_counts([]) == {}
