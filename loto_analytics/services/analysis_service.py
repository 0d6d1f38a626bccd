"""Analysis service — engine summary plus the dashboard feeds built on it."""

import asyncio
from collections.abc import Iterable
from functools import partial

from loto_analytics.config import settings
from loto_analytics.engine.summary import SummaryAssembler
from loto_analytics.engine.validator import ValidationMode, sort_draws, validate_draws
from loto_analytics.ingest.sheet_parser import load_draws
from loto_analytics.schemas.analysis import (
    AnalysisReport,
    HeatmapCell,
    NumberStatistic,
    TrendPoint,
)
from loto_analytics.schemas.draws import DrawRecord

GRID_COLUMNS = 5
MIN_INTENSITY = 0.3


async def _run_sync(func, *args, **kwargs):
    """Run a blocking function (sheet parsing, validation) in the default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(func, *args, **kwargs))


def build_heatmap(stats: list[NumberStatistic]) -> list[HeatmapCell]:
    """Lay the 25 numbers on a 5x5 grid with frequency-scaled intensity."""
    if not stats:
        return []

    ordered = sorted(stats, key=lambda s: s.number)
    max_freq = max(s.frequency for s in ordered)
    min_freq = min(s.frequency for s in ordered)
    spread = max_freq - min_freq

    cells = []
    for stat in ordered:
        if spread:
            scaled = (stat.frequency - min_freq) / spread
            intensity = MIN_INTENSITY + scaled * (1 - MIN_INTENSITY)
        else:
            intensity = 1.0
        cells.append(HeatmapCell(
            number=stat.number,
            row=(stat.number - 1) // GRID_COLUMNS,
            column=(stat.number - 1) % GRID_COLUMNS,
            frequency=stat.frequency,
            intensity=round(intensity, 4),
        ))
    return cells


def build_trend(draws: Iterable[DrawRecord], window: int | None = None) -> list[TrendPoint]:
    """Sum and even-count series for the most recent draws."""
    window = settings.TREND_WINDOW if window is None else window
    if window <= 0:
        return []

    recent = sort_draws(draws)[-window:]
    return [
        TrendPoint(
            sequence_id=d.sequence_id,
            date=d.date,
            sum=sum(d.numbers),
            even=sum(1 for n in d.numbers if n % 2 == 0),
        )
        for d in recent
    ]


async def build_report(
    records: Iterable,
    mode: ValidationMode | str = ValidationMode.STRICT,
    trend_window: int | None = None,
) -> AnalysisReport:
    """Validate, analyze and attach the heatmap and trend feeds."""
    report = await _run_sync(validate_draws, list(records), mode)
    summary = await SummaryAssembler().summarize_async(report)

    return AnalysisReport(
        summary=summary,
        heatmap=build_heatmap(summary.most_frequent),
        trend=build_trend(report.draws, trend_window),
    )


async def build_report_from_sheet(
    content: bytes,
    filename: str,
    mode: ValidationMode | str = ValidationMode.STRICT,
) -> AnalysisReport:
    """Parse an uploaded results sheet and analyze it."""
    records = await _run_sync(load_draws, content, filename)
    return await build_report(records, mode)
