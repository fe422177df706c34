"""Pydantic models for per-subscriber batch results."""

from pydantic import BaseModel, Field

from models.types import LocationID, SectionName, SubscriberID


class ResolvedSection(BaseModel):
    """One subscription resolved against a fetched product."""

    name: SectionName
    text: str | None = None
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.text is not None


class SubscriberOutcome(BaseModel):
    """What happened to one subscriber during a batch run."""

    subscriber_id: SubscriberID
    location_id: LocationID
    sections: list[ResolvedSection] = Field(default_factory=list)
    fetch_error: str | None = None
    sent: int = Field(0, ge=0)
    failed: int = Field(0, ge=0)
    missing: int = Field(0, ge=0)

    @property
    def ok(self) -> bool:
        return self.fetch_error is None and self.failed == 0
