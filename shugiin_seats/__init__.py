"""衆議院選挙（小選挙区比例代表並立制）の議席配分計算."""

from shugiin_seats.application.usecases.compute_seat_result_usecase import (
    ComputeSeatResultUseCase,
    compute_result,
)
from shugiin_seats.domain.exceptions import (
    ConfigurationError,
    DistrictCountMismatchError,
    EmptyDistrictError,
    InvalidVoteCountError,
    NoVotesError,
    SeatAllocationException,
    SeatConfigMismatchError,
    UnknownRegionError,
    VoteDataFormatError,
)
from shugiin_seats.domain.services.dhondt_apportioner import DHondtApportioner
from shugiin_seats.domain.services.fptp_resolver import (
    FptpResolver,
    resolve_fptp_winner,
)
from shugiin_seats.domain.value_objects.block_seat_table import BlockSeatTable
from shugiin_seats.domain.value_objects.seat_tally import PartySeats, SeatTally
from shugiin_seats.domain.value_objects.vote_snapshot import (
    Candidate,
    FptpDistrictResult,
    PrBlockResult,
    VoteSnapshot,
    VoteSnapshotBuilder,
)


__all__ = [
    # Vote data
    "Candidate",
    "FptpDistrictResult",
    "PrBlockResult",
    "VoteSnapshot",
    "VoteSnapshotBuilder",
    "BlockSeatTable",
    # Seat allocation
    "FptpResolver",
    "resolve_fptp_winner",
    "DHondtApportioner",
    "SeatTally",
    "PartySeats",
    "ComputeSeatResultUseCase",
    "compute_result",
    # Errors
    "SeatAllocationException",
    "EmptyDistrictError",
    "NoVotesError",
    "UnknownRegionError",
    "InvalidVoteCountError",
    "SeatConfigMismatchError",
    "DistrictCountMismatchError",
    "VoteDataFormatError",
    "ConfigurationError",
]
