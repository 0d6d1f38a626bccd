"""Draw record validation with strict and lenient policies."""

from collections.abc import Iterable, Mapping
from enum import Enum

from loguru import logger
from pydantic import BaseModel, ValidationError

from loto_analytics.engine.errors import (
    AnalysisError,
    DuplicateSequenceId,
    MalformedRecord,
)
from loto_analytics.schemas.draws import DrawRecord, RecordDefect


class ValidationMode(str, Enum):
    STRICT = "strict"    # raise on the first bad record
    LENIENT = "lenient"  # skip bad records and report them


class ValidationReport(BaseModel):
    draws: list[DrawRecord] = []
    defects: list[RecordDefect] = []

    @property
    def skipped(self) -> int:
        return len(self.defects)


def _raw_sequence_id(raw) -> int | None:
    if isinstance(raw, Mapping):
        value = raw.get("sequence_id")
    else:
        value = getattr(raw, "sequence_id", None)
    return value if isinstance(value, int) and not isinstance(value, bool) else None


def _format_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


class DrawValidator:
    """Turn raw draw records into validated, unique DrawRecords."""

    def __init__(self, mode: ValidationMode | str = ValidationMode.STRICT):
        self.mode = ValidationMode(mode)

    def _coerce(self, index: int, raw) -> DrawRecord:
        if isinstance(raw, DrawRecord):
            return raw
        try:
            if isinstance(raw, Mapping):
                return DrawRecord.model_validate(dict(raw))
            return DrawRecord.model_validate(raw, from_attributes=True)
        except ValidationError as e:
            raise MalformedRecord(
                f"Draw at position {index} is malformed: {_format_error(e)}",
                index=index,
                sequence_id=_raw_sequence_id(raw),
            ) from e

    def validate(self, records: Iterable) -> ValidationReport:
        """Validate every record, keeping the first record for each sequence id.

        Strict mode raises MalformedRecord / DuplicateSequenceId on the first
        defect. Lenient mode drops defective records and lists them in the
        report.
        """
        report = ValidationReport()
        seen_ids: set[int] = set()

        for index, raw in enumerate(records):
            try:
                draw = self._coerce(index, raw)
                if draw.sequence_id in seen_ids:
                    raise DuplicateSequenceId(
                        f"Sequence id {draw.sequence_id} appears more than once "
                        f"(position {index})",
                        index=index,
                        sequence_id=draw.sequence_id,
                    )
            except AnalysisError as e:
                if self.mode is ValidationMode.STRICT:
                    raise
                logger.warning("Skipping draw at position {}: {}", index, e.message)
                report.defects.append(RecordDefect(
                    index=index,
                    sequence_id=e.sequence_id,
                    kind=e.kind,
                    message=e.message,
                ))
                continue

            seen_ids.add(draw.sequence_id)
            report.draws.append(draw)

        logger.debug(
            "Validated {} draws ({} skipped, mode={})",
            len(report.draws), report.skipped, self.mode.value,
        )
        return report


def validate_draws(
    records: Iterable, mode: ValidationMode | str = ValidationMode.STRICT
) -> ValidationReport:
    return DrawValidator(mode).validate(records)


def sort_draws(draws: Iterable[DrawRecord]) -> list[DrawRecord]:
    """Return draws ordered by ascending sequence id."""
    return sorted(draws, key=lambda d: d.sequence_id)
