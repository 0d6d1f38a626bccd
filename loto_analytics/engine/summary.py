"""Summary assembly — orchestrates the analyzers into one AnalysisSummary.

Flow: validation -> {frequency, cycles, pattern} -> alerts -> summary.
The three middle analyzers only read the same sorted draw list, so the
async entry point runs them concurrently in the default executor.
"""

import asyncio
from collections.abc import Iterable
from functools import partial

from loguru import logger

from loto_analytics.engine.alerts import AlertGenerator
from loto_analytics.engine.constants import PICK_COUNT
from loto_analytics.engine.cycles import CycleDetector
from loto_analytics.engine.frequency import FrequencyTracker
from loto_analytics.engine.patterns import PatternAnalyzer
from loto_analytics.engine.validator import (
    ValidationMode,
    ValidationReport,
    sort_draws,
    validate_draws,
)
from loto_analytics.schemas.analysis import (
    AnalysisSummary,
    Cycle,
    NumberStatistic,
    OddEvenRatio,
    PatternAnalysis,
)


class SummaryAssembler:
    """Build the AnalysisSummary for a draw history."""

    def __init__(
        self,
        frequency_tracker: FrequencyTracker | None = None,
        cycle_detector: CycleDetector | None = None,
        pattern_analyzer: PatternAnalyzer | None = None,
        alert_generator: AlertGenerator | None = None,
    ):
        self.frequency_tracker = frequency_tracker or FrequencyTracker()
        self.cycle_detector = cycle_detector or CycleDetector()
        self.pattern_analyzer = pattern_analyzer or PatternAnalyzer()
        self.alert_generator = alert_generator or AlertGenerator()

    def assemble(
        self, records: Iterable, mode: ValidationMode | str = ValidationMode.STRICT
    ) -> AnalysisSummary:
        """Validate raw records and summarize them."""
        return self.summarize(validate_draws(records, mode))

    def summarize(self, report: ValidationReport) -> AnalysisSummary:
        draws = sort_draws(report.draws)
        if not draws:
            return self._empty(report)

        stats = self.frequency_tracker.compute(draws)
        cycles = self.cycle_detector.detect(draws)
        pattern = self.pattern_analyzer.analyze(draws)
        return self._combine(draws, report, stats, cycles, pattern)

    async def summarize_async(self, report: ValidationReport) -> AnalysisSummary:
        draws = sort_draws(report.draws)
        if not draws:
            return self._empty(report)

        loop = asyncio.get_running_loop()
        stats, cycles, pattern = await asyncio.gather(
            loop.run_in_executor(None, partial(self.frequency_tracker.compute, draws)),
            loop.run_in_executor(None, partial(self.cycle_detector.detect, draws)),
            loop.run_in_executor(None, partial(self.pattern_analyzer.analyze, draws)),
        )
        return self._combine(draws, report, stats, cycles, pattern)

    def _combine(
        self,
        draws: list,
        report: ValidationReport,
        stats: list[NumberStatistic],
        cycles: list[Cycle],
        pattern: PatternAnalysis | None,
    ) -> AnalysisSummary:
        # Ties always resolve by ascending number
        most_frequent = sorted(stats, key=lambda s: (-s.frequency, s.number))
        least_frequent = sorted(stats, key=lambda s: (s.frequency, s.number))
        most_overdue = sorted(stats, key=lambda s: (-s.delay, s.number))

        alerts = self.alert_generator.generate(cycles, most_overdue, pattern)

        total_sum = 0
        odd_total = 0
        for draw in draws:
            total_sum += sum(draw.numbers)
            odd_total += sum(1 for n in draw.numbers if n % 2 == 1)

        total_draws = len(draws)
        logger.info(
            "Analyzed {} draws: {} cycles, {} alerts, {} skipped",
            total_draws, len(cycles), len(alerts), report.skipped,
        )

        return AnalysisSummary(
            total_draws=total_draws,
            most_frequent=most_frequent,
            least_frequent=least_frequent,
            most_overdue=most_overdue,
            odd_even_ratio=OddEvenRatio(
                odd=odd_total,
                even=total_draws * PICK_COUNT - odd_total,
            ),
            average_sum=total_sum / total_draws,
            cycles=cycles,
            last_draw_pattern=pattern or PatternAnalysis(),
            alerts=alerts,
            skipped_records=report.skipped,
            defects=list(report.defects),
        )

    @staticmethod
    def _empty(report: ValidationReport) -> AnalysisSummary:
        logger.info("No valid draws to analyze ({} skipped)", report.skipped)
        return AnalysisSummary(
            skipped_records=report.skipped,
            defects=list(report.defects),
        )


def analyze_draws(
    records: Iterable, mode: ValidationMode | str = ValidationMode.STRICT
) -> AnalysisSummary:
    """Analyze a draw history in any order. Strict mode raises on bad records."""
    return SummaryAssembler().assemble(records, mode)


async def analyze_draws_async(
    records: Iterable, mode: ValidationMode | str = ValidationMode.STRICT
) -> AnalysisSummary:
    """Same result as analyze_draws, with the analyzers fanned out to threads."""
    report = validate_draws(records, mode)
    return await SummaryAssembler().summarize_async(report)
