"""Cycle detection: runs of draws that together cover all 25 numbers."""

from collections.abc import Iterable

from loguru import logger

from loto_analytics.engine.constants import ALL_NUMBERS
from loto_analytics.engine.validator import sort_draws
from loto_analytics.schemas.analysis import Cycle
from loto_analytics.schemas.draws import DrawRecord


class CycleDetector:
    """Scan draws in order and split them into closed cycles plus an open tail.

    A cycle closes on the draw at which the accumulated set of numbers first
    reaches all 25 candidates. The next cycle starts at the following draw's
    own sequence id, even when ids are not contiguous.
    """

    def detect(self, draws: Iterable[DrawRecord]) -> list[Cycle]:
        ordered = sort_draws(draws)
        if not ordered:
            return []

        cycles: list[Cycle] = []
        seen: set[int] = set()
        cycle_start = ordered[0].sequence_id
        cycle_number = 1

        for i, draw in enumerate(ordered):
            seen.update(draw.numbers)
            if len(seen) < len(ALL_NUMBERS):
                continue

            cycles.append(Cycle(
                cycle_number=cycle_number,
                start_sequence_id=cycle_start,
                end_sequence_id=draw.sequence_id,
                length=draw.sequence_id - cycle_start + 1,
                missing_numbers=[],
            ))
            cycle_number += 1
            seen = set()
            if i + 1 < len(ordered):
                cycle_start = ordered[i + 1].sequence_id

        if seen:
            last_sequence_id = ordered[-1].sequence_id
            cycles.append(Cycle(
                cycle_number=cycle_number,
                start_sequence_id=cycle_start,
                end_sequence_id=None,
                length=last_sequence_id - cycle_start + 1,
                missing_numbers=[n for n in ALL_NUMBERS if n not in seen],
            ))

        logger.debug(
            "Detected {} cycles over {} draws (trailing open: {})",
            len(cycles), len(ordered), bool(seen),
        )
        return cycles
