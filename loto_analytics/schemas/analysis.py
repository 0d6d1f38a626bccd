"""Pydantic schemas for analysis results."""

from pydantic import BaseModel

from loto_analytics.engine.validator import ValidationMode
from loto_analytics.schemas.draws import DrawInput, RecordDefect


class NumberStatistic(BaseModel):
    number: int
    frequency: int
    last_appearance: int  # 0 = never seen
    delay: int


class Cycle(BaseModel):
    cycle_number: int
    start_sequence_id: int
    end_sequence_id: int | None = None  # None while the cycle is open
    length: int
    missing_numbers: list[int] = []

    @property
    def is_open(self) -> bool:
        return self.end_sequence_id is None


class PatternAnalysis(BaseModel):
    sum: int = 0
    even: int = 0
    odd: int = 0
    primes: int = 0
    fibonacci: int = 0
    repeated: int = 0  # shared with the previous draw


class OddEvenRatio(BaseModel):
    odd: int = 0
    even: int = 0


class AnalysisSummary(BaseModel):
    total_draws: int = 0
    most_frequent: list[NumberStatistic] = []
    least_frequent: list[NumberStatistic] = []
    most_overdue: list[NumberStatistic] = []
    odd_even_ratio: OddEvenRatio = OddEvenRatio()
    average_sum: float = 0.0
    cycles: list[Cycle] = []
    last_draw_pattern: PatternAnalysis = PatternAnalysis()
    alerts: list[str] = []
    skipped_records: int = 0
    defects: list[RecordDefect] = []


# --- Dashboard feeds ---

class HeatmapCell(BaseModel):
    number: int
    row: int
    column: int
    frequency: int
    intensity: float  # 0.3 (coldest) .. 1.0 (hottest)


class TrendPoint(BaseModel):
    sequence_id: int
    date: str
    sum: int
    even: int


class AnalysisReport(BaseModel):
    summary: AnalysisSummary
    heatmap: list[HeatmapCell]
    trend: list[TrendPoint]


# --- API ---

class AnalysisRequest(BaseModel):
    draws: list[DrawInput]
    mode: ValidationMode = ValidationMode.STRICT
    trend_window: int | None = None  # None = settings.TREND_WINDOW


class AdvisoryContextResponse(BaseModel):
    total_draws: int
    context: str
