"""Exceptions raised by the draw analysis engine."""


class AnalysisError(Exception):
    """Base class for record-level analysis failures."""

    kind: str = "analysis_error"

    def __init__(self, message: str, *, index: int | None = None, sequence_id: int | None = None):
        super().__init__(message)
        self.message = message
        self.index = index
        self.sequence_id = sequence_id

    def to_detail(self) -> dict:
        return {
            "error": self.kind,
            "message": self.message,
            "index": self.index,
            "sequence_id": self.sequence_id,
        }


class MalformedRecord(AnalysisError):
    """A draw violates the count, range or distinctness invariants."""

    kind = "malformed_record"


class DuplicateSequenceId(AnalysisError):
    """Two draws share the same sequence id."""

    kind = "duplicate_sequence_id"
