"""Tests for the booking event notification handlers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

from app.application.use_cases.notifications import events as events_module
from app.application.use_cases.notifications import (
    get_user_notifications,
    is_urgent_booking,
    send_booking_request_notifications,
    send_payment_completion_notifications,
    send_provider_response_notification,
    send_status_update_notification,
    send_welcome_notification,
)
from app.domain.entities import BookingNotificationData, UserType
from app.infrastructure.models import NotificationModel
from app.infrastructure.repositories import NotificationRepository

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
def marketplace(seed_account):
    seed_account("acct_client", client_id="client_1")
    seed_account("acct_provider", provider_id="provider_1")


def _booking(scheduled_date: str) -> BookingNotificationData:
    return BookingNotificationData(
        id="bk_1",
        client_id="acct_client",
        provider_id="provider_1",
        service_title="House Cleaning",
        scheduled_date=scheduled_date,
        scheduled_time="10:00 AM",
        location="East Legon, Accra",
        total_amount=150,
        currency="GHS",
    )


def _rows(session, user_id):
    return (
        session.query(NotificationModel)
        .filter(NotificationModel.user_id == user_id)
        .order_by(NotificationModel.created_at)
        .all()
    )


def _fail_for(user_type: UserType):
    original = NotificationRepository.create

    def create(self, notification):
        if notification.user_type == user_type:
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))
        return original(self, notification)

    return create


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (timedelta(hours=23), True),
        (timedelta(hours=24), True),
        (timedelta(hours=25), False),
        (timedelta(hours=-1), False),
        (timedelta(0), False),
    ],
)
def test_is_urgent_booking(offset, expected):
    assert is_urgent_booking((NOW + offset).isoformat(), now=NOW) is expected


def test_is_urgent_booking_accepts_datetimes_and_rejects_garbage():
    assert is_urgent_booking(NOW + timedelta(hours=2), now=NOW) is True
    assert is_urgent_booking("next tuesday", now=NOW) is False
    assert is_urgent_booking(None, now=NOW) is False


def test_booking_request_notifies_client_and_provider(session, marketplace):
    scheduled = (datetime.now(timezone.utc) + timedelta(hours=20)).isoformat()

    result = send_booking_request_notifications(session, _booking(scheduled), "acct_provider")

    assert result.success is True
    assert result.message == "Booking request notifications sent successfully"

    repository = NotificationRepository(session)
    client = repository.get(result.client_notification_id)
    provider = repository.get(result.provider_notification_id)

    assert client.user_id == "client_1"
    assert client.type == "BOOKING_REQUEST"
    assert client.title.startswith("Booking Request Sent")
    assert '"House Cleaning"' in client.message
    assert client.data["nextAction"] == "WAIT_FOR_PROVIDER_RESPONSE"
    assert client.data["status"] == "PENDING"
    assert client.data["amount"] == 150
    assert client.data["currency"] == "GHS"
    assert client.sent_via_email is True

    assert provider.user_id == "provider_1"
    assert provider.type == "BOOKING_REQUEST"
    assert provider.title.startswith("New Booking Request")
    assert "at 10:00 AM" in provider.message
    assert provider.data["requiresAction"] is True
    assert provider.data["isUrgent"] is True
    assert provider.data["nextAction"] == "ACCEPT_OR_DECLINE"
    assert provider.data["clientId"] == "acct_client"
    assert provider.data["location"] == "East Legon, Accra"


def test_booking_request_far_in_the_future_is_not_urgent(session, marketplace):
    scheduled = (datetime.now(timezone.utc) + timedelta(days=3)).isoformat()

    result = send_booking_request_notifications(session, _booking(scheduled), "acct_provider")

    provider = NotificationRepository(session).get(result.provider_notification_id)
    assert provider.data["isUrgent"] is False


def test_repeated_booking_request_is_not_deduplicated(session, marketplace):
    booking = _booking((datetime.now(timezone.utc) + timedelta(days=2)).isoformat())

    first = send_booking_request_notifications(session, booking, "acct_provider")
    second = send_booking_request_notifications(session, booking, "acct_provider")

    assert first.success and second.success
    assert first.client_notification_id != second.client_notification_id
    assert len(_rows(session, "client_1")) == 2
    assert len(_rows(session, "provider_1")) == 2


def test_partial_fan_out_failure_keeps_the_written_row(session, marketplace, monkeypatch):
    monkeypatch.setattr(NotificationRepository, "create", _fail_for(UserType.PROVIDER))

    result = send_booking_request_notifications(
        session, _booking("2026-12-01T10:00:00"), "acct_provider"
    )

    assert result.success is False
    assert result.message == "Some notifications failed to send"
    assert result.client_notification_id is not None
    assert result.provider_notification_id is None
    assert result.compensated is False
    assert len(_rows(session, "client_1")) == 1
    assert _rows(session, "provider_1") == []


def test_partial_fan_out_failure_is_compensated_when_enabled(session, marketplace, monkeypatch):
    monkeypatch.setattr(NotificationRepository, "create", _fail_for(UserType.CLIENT))
    monkeypatch.setattr(
        events_module,
        "get_settings",
        lambda: SimpleNamespace(notification_fanout_compensation=True),
    )

    result = send_payment_completion_notifications(
        session,
        booking_id="bk_1",
        client_account_id="acct_client",
        provider_account_id="acct_provider",
        service_title="House Cleaning",
        scheduled_date="2026-12-01T10:00:00",
        scheduled_time="10:00 AM",
        amount=150,
        currency="GHS",
    )

    assert result.success is False
    assert result.compensated is True
    assert result.client_notification_id is None
    assert result.provider_notification_id is None
    assert session.query(NotificationModel).count() == 0


def test_handlers_convert_unexpected_errors_into_results(session, marketplace, monkeypatch, caplog):
    def explode(*args, **kwargs):
        raise RuntimeError("template store unavailable")

    monkeypatch.setattr(events_module, "create_notification", explode)

    with caplog.at_level("ERROR"):
        fan_out = send_booking_request_notifications(
            session, _booking("2026-12-01T10:00:00"), "acct_provider"
        )
        single = send_welcome_notification(
            session, account_id="acct_client", user_type=UserType.CLIENT, user_name="Ama"
        )

    assert fan_out.success is False
    assert fan_out.error == "template store unavailable"
    assert single.success is False
    assert single.error == "template store unavailable"
    assert "Failed to create booking request notifications for bk_1" in caplog.text


def test_provider_acceptance(session, marketplace):
    result = send_provider_response_notification(
        session,
        booking_id="bk_1",
        client_account_id="acct_client",
        provider_name="Kofi Cleaners",
        service_title="House Cleaning",
        response="ACCEPTED",
    )

    notification = NotificationRepository(session).get(result.notification_id)
    assert result.success is True
    assert notification.user_id == "client_1"
    assert notification.type == "BOOKING_CONFIRMED"
    assert notification.title.startswith("Booking Request Accepted")
    assert "Kofi Cleaners has accepted" in notification.message
    assert notification.data["nextAction"] == "COMPLETE_PAYMENT"
    assert notification.data["response"] == "ACCEPTED"
    assert notification.sent_via_email is False


@pytest.mark.parametrize(
    ("decline_message", "expected_text"),
    [
        ("Fully booked that week", "Reason: Fully booked that week"),
        (None, "You can try booking with another provider."),
    ],
)
def test_provider_decline(session, marketplace, decline_message, expected_text):
    result = send_provider_response_notification(
        session,
        booking_id="bk_1",
        client_account_id="acct_client",
        provider_name="Kofi Cleaners",
        service_title="House Cleaning",
        response="DECLINED",
        message=decline_message,
    )

    notification = NotificationRepository(session).get(result.notification_id)
    assert notification.type == "BOOKING_CANCELLED"
    assert notification.title.startswith("Booking Request Declined")
    assert expected_text in notification.message
    assert notification.data["nextAction"] == "FIND_NEW_PROVIDER"
    assert notification.data["providerMessage"] == decline_message


def test_provider_response_rejects_unknown_answers(session, marketplace):
    result = send_provider_response_notification(
        session,
        booking_id="bk_1",
        client_account_id="acct_client",
        provider_name="Kofi Cleaners",
        service_title="House Cleaning",
        response="MAYBE",
    )

    assert result.success is False
    assert result.error
    assert session.query(NotificationModel).count() == 0


@pytest.mark.parametrize(
    ("new_status", "user_type", "expected_type", "title_part", "message_part", "emailed"),
    [
        ("CONFIRMED", UserType.CLIENT, "BOOKING_CONFIRMED", "Confirmed", "has been confirmed", True),
        ("CONFIRMED", UserType.PROVIDER, "BOOKING_CONFIRMED", "Confirmed", "contact the client", True),
        ("IN_PROGRESS", UserType.CLIENT, "BOOKING_CONFIRMED", "Started", "has started", False),
        ("COMPLETED", UserType.CLIENT, "BOOKING_CONFIRMED", "Completed", "leave a review", True),
        ("COMPLETED", UserType.PROVIDER, "BOOKING_CONFIRMED", "Completed", "Payment will be released", True),
        ("CANCELLED", UserType.CLIENT, "BOOKING_CANCELLED", "Cancelled", "refunded", True),
        ("CANCELLED", UserType.PROVIDER, "BOOKING_CANCELLED", "Cancelled", "available for this time slot", True),
    ],
)
def test_status_update_templates(
    session, marketplace, new_status, user_type, expected_type, title_part, message_part, emailed
):
    account_id = "acct_client" if user_type == UserType.CLIENT else "acct_provider"

    result = send_status_update_notification(
        session,
        booking_id="bk_1",
        account_id=account_id,
        user_type=user_type,
        old_status="PENDING",
        new_status=new_status,
        service_title="House Cleaning",
    )

    notification = NotificationRepository(session).get(result.notification_id)
    assert result.success is True
    assert notification.type == expected_type
    assert title_part in notification.title
    assert message_part in notification.message
    assert notification.sent_via_email is emailed
    assert notification.data["newStatus"] == new_status
    assert notification.data["statusMapped"] is True


def test_cancellation_for_client_mentions_refund(session, marketplace):
    result = send_status_update_notification(
        session,
        booking_id="bk_1",
        account_id="acct_client",
        user_type="CLIENT",
        old_status="CONFIRMED",
        new_status="CANCELLED",
        service_title="House Cleaning",
        update_message="Cancelled by the provider due to illness.",
    )

    notification = NotificationRepository(session).get(result.notification_id)
    assert "Cancelled" in notification.title
    assert notification.type == "BOOKING_CANCELLED"
    assert "refund" in notification.message
    assert notification.message.endswith("Cancelled by the provider due to illness.")
    assert notification.data["oldStatus"] == "CONFIRMED"
    assert notification.data["updateMessage"] == "Cancelled by the provider due to illness."


def test_unmapped_status_uses_generic_copy(session, marketplace, caplog):
    with caplog.at_level("WARNING"):
        result = send_status_update_notification(
            session,
            booking_id="bk_1",
            account_id="acct_client",
            user_type=UserType.CLIENT,
            old_status="CONFIRMED",
            new_status="ON_HOLD",
            service_title="House Cleaning",
        )

    notification = NotificationRepository(session).get(result.notification_id)
    assert notification.title == "Booking Status Update"
    assert notification.type == "BOOKING_CONFIRMED"
    assert notification.message == "Your booking status has been updated to: ON_HOLD"
    assert notification.data["statusMapped"] is False
    assert notification.sent_via_email is False
    assert "No status template for 'ON_HOLD'" in caplog.text


def test_payment_completion_notifies_both_parties(session, marketplace):
    result = send_payment_completion_notifications(
        session,
        booking_id="bk_1",
        client_account_id="acct_client",
        provider_account_id="acct_provider",
        service_title="House Cleaning",
        scheduled_date="2026-12-01T10:00:00",
        scheduled_time="10:00 AM",
        amount=150.0,
        currency="GHS",
    )

    repository = NotificationRepository(session)
    client = repository.get(result.client_notification_id)
    provider = repository.get(result.provider_notification_id)

    assert result.success is True
    assert client.type == "PAYMENT_PROCESSED"
    assert "GHS 150 " in client.message
    assert "12/1/2026 at 10:00 AM" in client.message
    assert client.data["paymentStatus"] == "COMPLETED"
    assert client.data["nextAction"] == "WAIT_FOR_SERVICE"
    assert provider.type == "PAYMENT_RECEIVED"
    assert provider.user_id == "provider_1"
    assert provider.data["paymentStatus"] == "RECEIVED"
    assert provider.data["nextAction"] == "CONTACT_CLIENT"


@pytest.mark.parametrize(
    ("user_type", "expected_text"),
    [
        (UserType.CLIENT, "browse and book amazing services"),
        (UserType.PROVIDER, "Complete your provider profile"),
    ],
)
def test_welcome_notification(session, marketplace, user_type, expected_text):
    account_id = "acct_client" if user_type == UserType.CLIENT else "acct_provider"

    result = send_welcome_notification(
        session, account_id=account_id, user_type=user_type, user_name="Ama"
    )

    notification = NotificationRepository(session).get(result.notification_id)
    assert notification.type == "SYSTEM_ANNOUNCEMENT"
    assert notification.title.startswith("Welcome to EasyBuk!")
    assert "Welcome to EasyBuk, Ama!" in notification.message
    assert expected_text in notification.message
    assert notification.data["isWelcome"] is True
    assert notification.data["userType"] == user_type.value
    assert "joinedAt" in notification.data


def test_handler_payload_round_trips_through_the_inbox(session, session_factory, marketplace):
    send_provider_response_notification(
        session,
        booking_id="bk_1",
        client_account_id="acct_client",
        provider_name="Kofi Cleaners",
        service_title="House Cleaning",
        response="DECLINED",
        message="Out of town",
    )

    result = get_user_notifications(session_factory, "acct_client")

    assert result.success is True
    [notification] = result.notifications
    expected = {
        "bookingId": "bk_1",
        "serviceTitle": "House Cleaning",
        "providerName": "Kofi Cleaners",
        "response": "DECLINED",
        "providerMessage": "Out of town",
        "nextAction": "FIND_NEW_PROVIDER",
    }
    timestamp = notification.data.pop("timestamp")
    assert notification.data == expected
    assert datetime.fromisoformat(timestamp)


@pytest.mark.parametrize("new_status", ["cancelled", "PENDING"])
def test_statuses_without_an_exact_template_take_the_generic_copy(session, marketplace, new_status):
    result = send_status_update_notification(
        session,
        booking_id="bk_1",
        account_id="acct_client",
        user_type=UserType.CLIENT,
        old_status="CONFIRMED",
        new_status=new_status,
        service_title="House Cleaning",
    )

    notification = NotificationRepository(session).get(result.notification_id)
    assert result.success is True
    assert notification.title == "Booking Status Update"
    assert notification.type == "BOOKING_CONFIRMED"
    assert notification.message == f"Your booking status has been updated to: {new_status}"
    assert notification.data["newStatus"] == new_status
    assert notification.data["statusMapped"] is False
