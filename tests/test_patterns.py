"""Tests for last-draw pattern classification."""

from loto_analytics.engine.patterns import PatternAnalyzer
from loto_analytics.engine.validator import validate_draws
from loto_analytics.schemas.draws import DrawRecord
from tests.conftest import HIGH, LOW, make_draw


class TestPatternAnalyzer:

    def test_empty_input(self):
        assert PatternAnalyzer().analyze([]) is None

    def test_single_draw(self, single_draw):
        pattern = PatternAnalyzer().analyze(validate_draws(single_draw).draws)

        assert pattern.sum == 120
        assert (pattern.even, pattern.odd) == (7, 8)
        assert pattern.primes == 6      # 2 3 5 7 11 13
        assert pattern.fibonacci == 6   # 1 2 3 5 8 13
        assert pattern.repeated == 0

    def test_uses_latest_two_draws(self):
        records = [make_draw(3, HIGH), make_draw(1, LOW), make_draw(2, LOW)]
        pattern = PatternAnalyzer().analyze(validate_draws(records).draws)

        # latest is draw 3 (11..25), previous is draw 2 (1..15)
        assert pattern.sum == 270
        assert pattern.repeated == 5
        assert pattern.primes == 5      # 11 13 17 19 23
        assert pattern.fibonacci == 2   # 13 21

    def test_classify(self):
        draw = DrawRecord(sequence_id=2, numbers=[2, 4, 6, 8, 10, 12, 14, 16,
                                                   18, 20, 22, 24, 1, 3, 5])
        previous = DrawRecord(sequence_id=1, numbers=LOW)
        pattern = PatternAnalyzer.classify(draw, previous)

        assert pattern.even == 12
        assert pattern.odd == 3
        assert pattern.repeated == 10   # 1-6, 8, 10, 12, 14
        assert pattern.sum == sum(draw.numbers)
