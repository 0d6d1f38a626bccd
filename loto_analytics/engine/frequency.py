"""Per-number frequency and delay ("atraso") tracking."""

from collections import Counter
from collections.abc import Iterable

from loto_analytics.engine.constants import ALL_NUMBERS
from loto_analytics.engine.validator import sort_draws
from loto_analytics.schemas.analysis import NumberStatistic
from loto_analytics.schemas.draws import DrawRecord


class FrequencyTracker:
    """Count occurrences and measure recency for every number 1-25."""

    def compute(self, draws: Iterable[DrawRecord]) -> list[NumberStatistic]:
        """Return one NumberStatistic per candidate number, ordered by number.

        A number that never appeared has ``last_appearance = 0``, so its delay
        equals the last sequence id in the window.
        """
        ordered = sort_draws(draws)

        counter = Counter()
        last_seen: dict[int, int] = {}
        for draw in ordered:
            counter.update(draw.numbers)
            for num in draw.numbers:
                last_seen[num] = draw.sequence_id

        last_sequence_id = ordered[-1].sequence_id if ordered else 0

        result = []
        for num in ALL_NUMBERS:
            last_appearance = last_seen.get(num, 0)
            result.append(NumberStatistic(
                number=num,
                frequency=counter.get(num, 0),
                last_appearance=last_appearance,
                delay=last_sequence_id - last_appearance,
            ))
        return result
