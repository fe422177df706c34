"""Pydantic models for subscribers and the SMS provider configuration."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from models.types import LocationID, PhoneNumber, SubscriberID, SubscriptionList


class Subscriber(BaseModel):
    """A user who receives AFD sections by SMS."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    id: SubscriberID
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    phone: PhoneNumber = Field(..., min_length=1)
    location_id: LocationID = Field(..., min_length=1, alias="locationId")
    subscriptions: SubscriptionList = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or f"user {self.id}"


class SubscriberList(BaseModel):
    """Top-level users document."""

    users: list[Subscriber] = Field(default_factory=list)


class SmsConfig(BaseModel):
    """Twilio account settings.

    Accepts the historical ``twillio*`` keys as well as ``twilio*``.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    account_sid: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices(
            "twillioAccountSID", "twilioAccountSID", "account_sid"
        ),
    )
    auth_token: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices(
            "twillioAuthToken", "twilioAuthToken", "auth_token"
        ),
    )
    from_phone: PhoneNumber = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices(
            "twillioFromPhone", "twilioFromPhone", "from_phone"
        ),
    )
