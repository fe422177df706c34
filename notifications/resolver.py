"""
Resolves a subscriber's subscriptions to extracted discussion sections.
"""

from typing import List

from forecast.client import ForecastClient
from forecast.errors import SectionNotFoundError
from models.delivery import ResolvedSection
from models.subscriber import Subscriber
from shared.utils import format_issuance_time


def resolve_sections(
    subscriber: Subscriber, client: ForecastClient
) -> List[ResolvedSection]:
    """
    Fetch the subscriber's latest AFD once and extract every subscribed section.

    Args:
        subscriber: Subscriber whose location and subscriptions are used
        client: Forecast client used for the single product fetch

    Returns:
        One ResolvedSection per subscription, in subscription order.
        Missing sections have text=None and an error message.

    Raises:
        ForecastError: If the product could not be fetched
    """
    product = client.fetch_latest_discussion(subscriber.location_id)
    print(
        f"  → {product.product_name or 'AFD'} from {product.issuing_office or subscriber.location_id}"
        f" issued {format_issuance_time(product.issuance_time)}"
    )

    resolved = []
    for subscription in subscriber.subscriptions:
        try:
            text = product.get_discussion_section(subscription)
            resolved.append(ResolvedSection(name=subscription, text=text))
        except SectionNotFoundError as e:
            print(f"  ⊘ Missing section: {e}")
            resolved.append(ResolvedSection(name=subscription, error=str(e)))

    return resolved
