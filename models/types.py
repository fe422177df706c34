"""Shared type definitions for type checking.

Uses NewType for IDs to provide compile-time type safety - prevents mixing
different ID types (e.g., passing a ProductID where a LocationID is expected).

Uses TypeAlias for simple structural types.
"""

from typing import NewType, TypeAlias

# ID types using NewType for type safety
ProductID = NewType("ProductID", str)
LocationID = NewType("LocationID", str)  # Forecast office code, e.g. "LWX"

# Structural aliases using TypeAlias
SubscriberID: TypeAlias = int
SectionName: TypeAlias = str  # e.g. "synopsis", "aviation"
SubscriptionList: TypeAlias = list[str]
PhoneNumber: TypeAlias = str  # E.164 format, e.g. "+15555550100"
