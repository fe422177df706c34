"""Unit tests for Pydantic models."""

import unittest

from pydantic import ValidationError

from forecast.errors import SectionNotFoundError
from models import (
    Product,
    ProductListing,
    ResolvedSection,
    SmsConfig,
    Subscriber,
    SubscriberList,
    SubscriberOutcome,
)
from tests.fixtures.product_factory import create_test_listing, create_test_product
from tests.fixtures.subscriber_factory import create_test_sms_config, create_test_subscriber


class TestProductModels(unittest.TestCase):
    """Tests for Product and ProductListing."""

    def test_product_from_api_json(self):
        """camelCase API keys mapped to fields."""
        product = Product.model_validate(create_test_product(product_id="p1"))

        self.assertEqual(product.id, "p1")
        self.assertEqual(product.wmo_collective_id, "FXUS61")
        self.assertEqual(product.issuing_office, "KLWX")
        self.assertEqual(product.product_code, "AFD")
        self.assertEqual(product.product_name, "Area Forecast Discussion")
        self.assertIn(".SYNOPSIS...", product.product_text)

    def test_product_is_immutable(self):
        product = Product.model_validate(create_test_product())

        with self.assertRaises(ValidationError):
            product.product_text = "changed"

    def test_product_requires_id(self):
        with self.assertRaises(ValidationError):
            Product.model_validate({"productCode": "AFD"})

    def test_get_discussion_section(self):
        product = Product(id="p1", product_text=".MARINE...Calm seas.\n&&")

        self.assertEqual(product.get_discussion_section("marine"), "MARINE:\n\nCalm seas.")

    def test_get_discussion_section_missing(self):
        product = Product(id="p1", product_text="")

        with self.assertRaises(SectionNotFoundError):
            product.get_discussion_section("marine")

    def test_listing_reads_graph_key(self):
        listing = ProductListing.model_validate(create_test_listing(["a", "b"]))

        self.assertEqual([p.id for p in listing.products], ["a", "b"])

    def test_listing_defaults_empty(self):
        self.assertEqual(ProductListing.model_validate({}).products, [])


class TestSubscriberModels(unittest.TestCase):
    """Tests for Subscriber, SubscriberList and SmsConfig."""

    def test_subscriber_from_users_json(self):
        subscriber = Subscriber.model_validate(
            create_test_subscriber(subscriptions=["synopsis", "aviation"])
        )

        self.assertEqual(subscriber.id, 1)
        self.assertEqual(subscriber.location_id, "LWX")
        self.assertEqual(subscriber.subscriptions, ["synopsis", "aviation"])
        self.assertEqual(subscriber.full_name, "Test User")

    def test_full_name_falls_back_to_id(self):
        subscriber = Subscriber.model_validate(
            create_test_subscriber(user_id=7, first_name="", last_name="")
        )

        self.assertEqual(subscriber.full_name, "user 7")

    def test_subscriber_requires_phone_and_location(self):
        with self.assertRaises(ValidationError):
            Subscriber.model_validate(create_test_subscriber(phone=""))
        with self.assertRaises(ValidationError):
            Subscriber.model_validate(create_test_subscriber(locationId=""))

    def test_subscriber_list(self):
        users = SubscriberList.model_validate(
            {"users": [create_test_subscriber(user_id=1), create_test_subscriber(user_id=2)]}
        )

        self.assertEqual([u.id for u in users.users], [1, 2])

    def test_sms_config_historical_keys(self):
        config = SmsConfig.model_validate(create_test_sms_config())

        self.assertEqual(config.account_sid, "ACtest0000000000000000000000000000")
        self.assertEqual(config.auth_token, "test-auth-token")
        self.assertEqual(config.from_phone, "+15555550199")

    def test_sms_config_correct_spelling(self):
        config = SmsConfig.model_validate(
            {
                "twilioAccountSID": "AC1",
                "twilioAuthToken": "token",
                "twilioFromPhone": "+15555550123",
            }
        )

        self.assertEqual(config.account_sid, "AC1")

    def test_sms_config_requires_all_fields(self):
        data = create_test_sms_config()
        del data["twillioAuthToken"]

        with self.assertRaises(ValidationError):
            SmsConfig.model_validate(data)


class TestDeliveryModels(unittest.TestCase):
    """Tests for ResolvedSection and SubscriberOutcome."""

    def test_resolved_section_found(self):
        self.assertTrue(ResolvedSection(name="marine", text="MARINE:\n\nCalm.").found)
        self.assertFalse(ResolvedSection(name="marine", error="missing").found)

    def test_outcome_ok(self):
        self.assertTrue(SubscriberOutcome(subscriber_id=1, location_id="LWX", sent=2).ok)
        self.assertFalse(
            SubscriberOutcome(subscriber_id=1, location_id="LWX", fetch_error="boom").ok
        )
        self.assertFalse(SubscriberOutcome(subscriber_id=1, location_id="LWX", failed=1).ok)

    def test_outcome_rejects_negative_counts(self):
        with self.assertRaises(ValidationError):
            SubscriberOutcome(subscriber_id=1, location_id="LWX", sent=-1)


if __name__ == "__main__":
    unittest.main()
