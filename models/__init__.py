"""Pydantic models for data validation and type checking."""

from models.delivery import ResolvedSection, SubscriberOutcome
from models.product import Product, ProductListing
from models.subscriber import SmsConfig, Subscriber, SubscriberList

__all__ = [
    "Product",
    "ProductListing",
    "Subscriber",
    "SubscriberList",
    "SmsConfig",
    "ResolvedSection",
    "SubscriberOutcome",
]
