"""Rule-based anomaly alerts over the analysis outputs."""

from loto_analytics.engine.constants import (
    CRITICAL_DELAY_THRESHOLD,
    LONG_CYCLE_THRESHOLD,
    SUM_LOWER_BOUND,
    SUM_UPPER_BOUND,
)
from loto_analytics.schemas.analysis import Cycle, NumberStatistic, PatternAnalysis


class AlertGenerator:
    """Apply the fixed alert rules in order: long open cycle, critical delays, sum anomaly.

    Rules are independent; nothing is deduplicated or re-sorted.
    """

    def __init__(
        self,
        long_cycle: int = LONG_CYCLE_THRESHOLD,
        critical_delay: int = CRITICAL_DELAY_THRESHOLD,
        sum_bounds: tuple[int, int] = (SUM_LOWER_BOUND, SUM_UPPER_BOUND),
    ):
        self.long_cycle = long_cycle
        self.critical_delay = critical_delay
        self.sum_lower, self.sum_upper = sum_bounds

    def generate(
        self,
        cycles: list[Cycle],
        most_overdue: list[NumberStatistic],
        last_pattern: PatternAnalysis | None,
    ) -> list[str]:
        """Build alert messages.

        Args:
            cycles: Cycles in scan order; only the last one is inspected.
            most_overdue: Statistics already sorted by delay descending.
            last_pattern: Pattern of the latest draw, None when there is none.
        """
        alerts: list[str] = []

        current = cycles[-1] if cycles else None
        if current is not None and current.is_open and current.length > self.long_cycle:
            missing = ", ".join(str(n) for n in sorted(current.missing_numbers))
            alerts.append(
                f"⚠️ Ciclo atual está longo ({current.length} sorteios). "
                f"Faltam sair: {missing}."
            )

        for stat in most_overdue:
            if stat.delay > self.critical_delay:
                alerts.append(
                    f"🚨 Dezena {stat.number} está crítica! "
                    f"Atrasada há {stat.delay} concursos."
                )

        in_range = (
            last_pattern is None
            or self.sum_lower <= last_pattern.sum <= self.sum_upper
        )
        if not in_range:
            alerts.append(
                f"📉 Soma do último sorteio ({last_pattern.sum}) saiu da faixa comum "
                f"({self.sum_lower}-{self.sum_upper}). Tendência de normalização."
            )

        return alerts
