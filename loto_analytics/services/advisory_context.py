"""Render an AnalysisSummary as the briefing text handed to the advisor."""

from loto_analytics.config import settings
from loto_analytics.schemas.analysis import AnalysisSummary


def _join(values) -> str:
    return ", ".join(str(v) for v in values)


def build_advisory_context(summary: AnalysisSummary, top_n: int | None = None) -> str:
    """Summarize hot/cold/overdue numbers, the current cycle and the last draw."""
    top_n = settings.CONTEXT_TOP_N if top_n is None else top_n

    if summary.total_draws == 0:
        return "DADOS ESTATÍSTICOS DA LOTOFÁCIL: nenhum sorteio válido carregado."

    hot = _join(s.number for s in summary.most_frequent[:top_n])
    cold = _join(s.number for s in summary.least_frequent[:top_n])
    overdue = _join(
        f"Dezena {s.number} ({s.delay}x)" for s in summary.most_overdue[:top_n]
    )

    lines = [
        f"DADOS ESTATÍSTICOS DA LOTOFÁCIL (Total: {summary.total_draws} jogos):",
        "",
        f"1. DEZENAS QUENTES (Top {top_n}): {hot}",
        f"2. DEZENAS FRIAS (Top {top_n}): {cold}",
        f"3. ATRASOS CRÍTICOS: {overdue}",
        "",
        "4. CICLOS:",
    ]

    current = summary.cycles[-1] if summary.cycles else None
    if current:
        missing = _join(current.missing_numbers) if current.is_open else "Nenhum (Ciclo Fechado)"
        lines += [
            f"   - Ciclo Atual: #{current.cycle_number}",
            f"   - Tamanho Atual: {current.length} sorteios",
            f"   - Falta sair: [{missing}]",
        ]

    pattern = summary.last_draw_pattern
    lines += [
        "",
        "5. PADRÃO DO ÚLTIMO SORTEIO:",
        f"   - Soma: {pattern.sum} (Média Geral: {summary.average_sum:.0f})",
        f"   - Pares: {pattern.even} | Ímpares: {pattern.odd}",
        f"   - Primos: {pattern.primes}",
        f"   - Fibonacci: {pattern.fibonacci}",
        f"   - Repetidas do Anterior: {pattern.repeated}",
    ]

    if summary.alerts:
        lines += ["", "6. ALERTAS:"]
        lines += [f"   - {alert}" for alert in summary.alerts]

    return "\n".join(lines)
