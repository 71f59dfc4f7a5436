"""Tests for notifications, navigation and logging helpers"""
from storefront.logging import sanitize_id_for_logging, sanitize_string_for_logging
from storefront.navigation import Navigator
from storefront.notifications import Notification, Notifier, Variant


def test_success_and_error():
    notifier = Notifier()

    notifier.success("Cart updated successfully")
    notifier.error("Failed to update cart")

    assert notifier.history == [
        Notification("Success", "Cart updated successfully"),
        Notification("Error", "Failed to update cart", Variant.DESTRUCTIVE),
    ]
    assert notifier.last.is_error is True


def test_subscribers_receive_notifications():
    notifier = Notifier()
    received = []
    unsubscribe = notifier.subscribe(received.append)

    notifier.success("one")
    unsubscribe()
    notifier.success("two")

    assert [n.description for n in received] == ["one"]
    assert len(notifier.history) == 2


def test_broken_subscriber_is_isolated():
    notifier = Notifier()
    received = []

    def broken(_notification):
        raise RuntimeError("ui gone")

    notifier.subscribe(broken)
    notifier.subscribe(received.append)
    notifier.error("boom")

    assert len(received) == 1


def test_navigator_records_location():
    navigator = Navigator()

    assert navigator.location is None
    navigator.navigate("https://pay.test/a")

    assert navigator.location == "https://pay.test/a"


def test_sanitize_for_logging():
    assert sanitize_id_for_logging(None) == "N/A"
    assert sanitize_id_for_logging("665f1c2ab9") == "665f1c2a"
    assert sanitize_string_for_logging("shop\nFAKE ENTRY") == "shop\\nFAKE ENTRY"
    assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."
