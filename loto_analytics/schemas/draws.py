"""Pydantic schemas for draw records."""

from pydantic import BaseModel, Field, StrictInt, field_validator

from loto_analytics.engine.constants import NUMBER_MAX, NUMBER_MIN, PICK_COUNT


def _reject_bool(value):
    if isinstance(value, bool):
        raise ValueError("booleans are not valid draw values")
    return value


class DrawRecord(BaseModel):
    """One validated Lotofácil draw. Numbers are kept sorted ascending."""

    model_config = {"frozen": True, "from_attributes": True}

    sequence_id: int = Field(ge=1)
    date: str = ""
    numbers: tuple[int, ...]

    @field_validator("sequence_id", mode="before")
    @classmethod
    def _check_sequence_id_type(cls, value):
        return _reject_bool(value)

    @field_validator("numbers", mode="before")
    @classmethod
    def _check_number_types(cls, value):
        if isinstance(value, (list, tuple, set, frozenset)):
            for n in value:
                _reject_bool(n)
        return value

    @field_validator("numbers")
    @classmethod
    def _check_numbers(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if len(value) != PICK_COUNT:
            raise ValueError(f"expected {PICK_COUNT} numbers, got {len(value)}")
        if len(set(value)) != PICK_COUNT:
            raise ValueError("numbers must be distinct")
        out_of_range = [n for n in value if not NUMBER_MIN <= n <= NUMBER_MAX]
        if out_of_range:
            raise ValueError(
                f"numbers out of range {NUMBER_MIN}-{NUMBER_MAX}: {out_of_range}"
            )
        return tuple(sorted(value))


class DrawInput(BaseModel):
    """Unvalidated draw as received from a client."""

    sequence_id: StrictInt
    date: str = ""
    numbers: list[StrictInt]


class RecordDefect(BaseModel):
    index: int
    sequence_id: int | None = None
    kind: str  # malformed_record / duplicate_sequence_id
    message: str
