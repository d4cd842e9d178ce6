"""Shared Pydantic models for crptapi."""

from __future__ import annotations

from datetime import date, timedelta
from enum import StrEnum

from pydantic import BaseModel, Field

from crptapi.errors.exceptions import CrptApiError

# ── Enums ──


class TimeUnit(StrEnum):
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @property
    def seconds(self) -> float:
        return _UNIT_SECONDS[self]


_UNIT_SECONDS: dict[TimeUnit, float] = {
    TimeUnit.MILLISECONDS: 0.001,
    TimeUnit.SECONDS: 1.0,
    TimeUnit.MINUTES: 60.0,
    TimeUnit.HOURS: 3600.0,
    TimeUnit.DAYS: 86400.0,
}


def to_seconds(value: TimeUnit | str | timedelta | float) -> float:
    """Resolve a replenishment period to seconds.

    Accepts a TimeUnit, a unit name ("seconds", "MINUTES"), a timedelta, or a
    plain number of seconds. Raises ValueError for unknown or non-positive values.
    """
    if isinstance(value, TimeUnit):
        return value.seconds
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    elif isinstance(value, str):
        try:
            return TimeUnit(value.strip().lower()).seconds
        except ValueError:
            try:
                seconds = float(value)
            except ValueError:
                raise ValueError(f"Unknown time unit: {value!r}") from None
    elif isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Unsupported time unit: {value!r}")
    else:
        seconds = float(value)

    if seconds <= 0:
        raise ValueError(f"Time unit must be positive, got {value!r}")
    return seconds


class OutcomeKind(StrEnum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    TRANSPORT_ERROR = "transport_error"
    SERIALIZATION_ERROR = "serialization_error"
    CANCELLED = "cancelled"


# ── Document models ──


class _WireModel(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}


class Description(_WireModel):
    participant_inn: str | None = Field(default=None, alias="participantInn")


class Product(_WireModel):
    certificate_document: str | None = None
    certificate_document_date: date | None = None
    certificate_document_number: str | None = None
    owner_inn: str | None = None
    producer_inn: str | None = None
    production_date: date | None = None
    tnved_code: str | None = None
    uit_code: str | None = None
    uitu_code: str | None = None


class Document(_WireModel):
    """Document for introducing goods produced in the RF into circulation."""

    description: Description | None = None
    doc_id: str | None = None
    doc_status: str | None = None
    doc_type: str | None = None
    import_request: bool = Field(default=False, alias="importRequest")
    owner_inn: str | None = None
    participant_inn: str | None = None
    producer_inn: str | None = None
    production_date: date | None = None
    production_type: str | None = None
    products: list[Product] | None = None
    reg_date: date | None = None
    reg_number: str | None = None


# ── Runtime models ──


class SubmissionOutcome(BaseModel):
    """Classified result of one submission attempt."""

    kind: OutcomeKind
    status_code: int | None = None
    body: str | None = None
    error: CrptApiError | None = Field(default=None, exclude=True)
    elapsed_seconds: float = 0.0
    model_config = {"arbitrary_types_allowed": True}

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.ACCEPTED

    def raise_for_outcome(self) -> None:
        """Raise the carried error unless the document was accepted."""
        if self.error is not None:
            raise self.error
