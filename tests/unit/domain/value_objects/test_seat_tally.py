"""議席集計のテスト."""

import pytest

from shugiin_seats.domain.value_objects.seat_tally import PartySeats, SeatTally


class TestSeatTally:
    def test_counters_start_at_zero(self) -> None:
        tally = SeatTally()

        assert tally.fptp_seats("ldp") == 0
        assert tally.pr_seats("ldp") == 0
        assert tally.total_seats("ldp") == 0
        assert tally.parties() == []

    def test_record_seats(self) -> None:
        tally = SeatTally()
        tally.record_fptp_seat("ldp")
        tally.record_pr_seat("ldp", 5)
        tally.record_pr_seat("cdp", 3)

        assert tally.fptp_seats("ldp") == 1
        assert tally.pr_seats("ldp") == 5
        assert tally.total_seats("ldp") == 6
        assert tally.total_seats("cdp") == 3
        assert tally.total_fptp == 1
        assert tally.total_pr == 8
        assert tally.total == 9

    def test_parties_ordered_by_total_then_name(self) -> None:
        tally = SeatTally()
        tally.record_pr_seat("b", 2)
        tally.record_pr_seat("a", 2)
        tally.record_fptp_seat("c")
        tally.record_pr_seat("c", 4)
        tally.record_pr_seat("zero", 0)

        assert tally.parties() == ["c", "a", "b"]
        assert tally.rows()[0] == PartySeats(party="c", fptp=1, pr=4)
        assert tally.rows()[0].total == 5

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError):
            SeatTally().record_pr_seat("ldp", -1)

    def test_merge(self) -> None:
        left = SeatTally()
        left.record_fptp_seat("ldp")
        right = SeatTally()
        right.record_fptp_seat("ldp")
        right.record_pr_seat("cdp", 2)

        left.merge(right)

        assert left.as_dict() == {"ldp": (2, 0, 2), "cdp": (0, 2, 2)}

    def test_frozen_tally_rejects_updates(self) -> None:
        tally = SeatTally()
        tally.record_fptp_seat("ldp")
        tally.freeze()

        assert tally.frozen
        with pytest.raises(RuntimeError):
            tally.record_fptp_seat("ldp")
        with pytest.raises(RuntimeError):
            tally.record_pr_seat("ldp")
        with pytest.raises(RuntimeError):
            tally.merge(SeatTally())
        assert tally.total_seats("ldp") == 1

    def test_equality(self) -> None:
        first = SeatTally()
        second = SeatTally()
        for tally in (first, second):
            tally.record_fptp_seat("ldp")
            tally.record_pr_seat("cdp")

        assert first == second
        second.record_pr_seat("cdp")
        assert first != second

    def test_combined_total_is_sum(self) -> None:
        tally = SeatTally()
        for party in ["a", "b", "a", "c", "a"]:
            tally.record_fptp_seat(party)
        for party in ["b", "b", "c"]:
            tally.record_pr_seat(party)

        for party in tally.parties():
            assert tally.total_seats(party) == (
                tally.fptp_seats(party) + tally.pr_seats(party)
            )
