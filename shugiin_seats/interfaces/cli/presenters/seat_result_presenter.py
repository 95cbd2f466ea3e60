"""議席計算結果の表示用整形."""

import json

from typing import Any

from shugiin_seats.application.dtos.seat_result_dto import ComputeSeatResultOutputDto
from shugiin_seats.domain.value_objects.block_seat_table import BlockSeatTable


class SeatResultPresenter:
    """議席計算結果をテキスト表・JSONに整形する."""

    def __init__(self, block_seat_table: BlockSeatTable) -> None:
        self._table = block_seat_table

    def to_text(
        self,
        result: ComputeSeatResultOutputDto,
        by_block: bool = False,
    ) -> str:
        tally = result.tally
        header = f"{'政党':<16}  {'小選挙区':>8}  {'比例':>8}  {'合計':>8}"
        lines = [header, "-" * len(header)]
        for row in tally.rows():
            lines.append(f"{row.party:<16}  {row.fptp:>8}  {row.pr:>8}  {row.total:>8}")
        lines.append("-" * len(header))
        lines.append(
            f"{'合計':<16}  {tally.total_fptp:>8}  {tally.total_pr:>8}  {tally.total:>8}"
        )

        if by_block:
            for block, allocation in result.block_allocations.items():
                seated = sorted(
                    ((p, s) for p, s in allocation.items() if s > 0),
                    key=lambda item: (-item[1], item[0]),
                )
                lines.append("")
                lines.append(
                    f"=== {self._table.display_name(block)}ブロック "
                    f"(定数{self._table.seats(block)}) ==="
                )
                lines.extend(f"  {party:<16}  {seats:>4}" for party, seats in seated)
        return "\n".join(lines)

    def to_dict(
        self,
        result: ComputeSeatResultOutputDto,
        by_block: bool = False,
    ) -> dict[str, Any]:
        tally = result.tally
        data: dict[str, Any] = {
            "seat_table_version": self._table.version,
            "parties": [
                {"party": row.party, "fptp": row.fptp, "pr": row.pr, "total": row.total}
                for row in tally.rows()
            ],
            "totals": {
                "fptp": tally.total_fptp,
                "pr": tally.total_pr,
                "total": tally.total,
            },
        }
        if by_block:
            data["blocks"] = {
                block: {p: s for p, s in sorted(allocation.items()) if s > 0}
                for block, allocation in result.block_allocations.items()
            }
            data["districts"] = {
                district: {"name": winner.name, "party": winner.party}
                for district, winner in result.district_winners.items()
            }
        return data

    def to_json(
        self,
        result: ComputeSeatResultOutputDto,
        by_block: bool = False,
    ) -> str:
        return json.dumps(self.to_dict(result, by_block), ensure_ascii=False, indent=2)
