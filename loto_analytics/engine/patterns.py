"""Classification of the most recent draw."""

from collections.abc import Iterable

from loto_analytics.engine.constants import FIBONACCI, PRIMES
from loto_analytics.engine.validator import sort_draws
from loto_analytics.schemas.analysis import PatternAnalysis
from loto_analytics.schemas.draws import DrawRecord


class PatternAnalyzer:
    """Sum, parity, prime/Fibonacci membership and repeats of the last draw."""

    def analyze(self, draws: Iterable[DrawRecord]) -> PatternAnalysis | None:
        """Classify the latest draw. Returns None when there are no draws."""
        ordered = sort_draws(draws)
        if not ordered:
            return None

        last = ordered[-1]
        previous = ordered[-2] if len(ordered) > 1 else None
        return self.classify(last, previous)

    @staticmethod
    def classify(draw: DrawRecord, previous: DrawRecord | None = None) -> PatternAnalysis:
        nums = draw.numbers
        even = sum(1 for n in nums if n % 2 == 0)
        repeated = len(set(nums) & set(previous.numbers)) if previous else 0

        return PatternAnalysis(
            sum=sum(nums),
            even=even,
            odd=len(nums) - even,
            primes=sum(1 for n in nums if n in PRIMES),
            fibonacci=sum(1 for n in nums if n in FIBONACCI),
            repeated=repeated,
        )
