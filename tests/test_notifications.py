"""
Tests for booking confirmation notifications.
"""

import logging
import smtplib
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import httpx
from openai import APIConnectionError

from barberbook.models import Booking
from barberbook.notifications import FALLBACK_MESSAGE, BookingNotifier


def _booking() -> Booking:
    return Booking(
        id=5,
        customer_name="Jane Roe",
        customer_phone="555-0100",
        barber_id=1,
        service_id=1,
        date="2025-03-10",
        time="10:00",
        status="confirmed",
    )


def _openai_client(content=None, error=None) -> MagicMock:
    client = MagicMock()
    if error is not None:
        client.chat.completions.create.side_effect = error
    else:
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
        )
    return client


def test_message_without_api_key_uses_fallback():
    notifier = BookingNotifier()
    assert notifier.generate_message("Jane", "2025-03-10", "10:00") == FALLBACK_MESSAGE


def test_message_from_chat_model():
    openai_client = _openai_client("See you Monday, Jane!")
    notifier = BookingNotifier(openai_model="gpt-4", openai_client=openai_client)

    assert notifier.generate_message("Jane", "2025-03-10", "10:00") == "See you Monday, Jane!"
    kwargs = openai_client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "gpt-4"
    assert "Jane booked for 2025-03-10 at 10:00" in kwargs["messages"][1]["content"]


def test_client_built_from_api_key():
    with patch("barberbook.notifications.OpenAI") as openai_cls:
        openai_cls.return_value = _openai_client("Hi!")
        notifier = BookingNotifier(openai_api_key="sk-test")

        assert notifier.generate_message("Jane", "2025-03-10", "10:00") == "Hi!"
    openai_cls.assert_called_once_with(api_key="sk-test", timeout=15.0)


def test_message_falls_back_on_api_error():
    error = APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))
    notifier = BookingNotifier(openai_client=_openai_client(error=error))

    assert notifier.generate_message("Jane", "2025-03-10", "10:00") == FALLBACK_MESSAGE


def test_empty_completion_falls_back():
    notifier = BookingNotifier(openai_client=_openai_client(content=None))
    assert notifier.generate_message("Jane", "2025-03-10", "10:00") == FALLBACK_MESSAGE


def test_disabled_notifier_sends_nothing():
    notifier = BookingNotifier()

    with patch.object(BookingNotifier, "send_email") as send_email:
        notifier.notify_booking(_booking())
        send_email.assert_not_called()


def test_notify_sends_to_shop_inbox():
    notifier = BookingNotifier(smtp_host="smtp.test", recipient="shop@example.com")

    with patch.object(BookingNotifier, "send_email") as send_email:
        notifier.notify_booking(_booking())
        send_email.assert_called_once_with("shop@example.com", FALLBACK_MESSAGE)


def test_smtp_failure_does_not_raise():
    notifier = BookingNotifier(smtp_host="smtp.test", recipient="shop@example.com")

    with patch.object(BookingNotifier, "send_email", side_effect=smtplib.SMTPException("down")):
        notifier.notify_booking(_booking())  # should not raise


def test_smtp_failure_logs_booking_id(caplog):
    notifier = BookingNotifier(smtp_host="smtp.test", recipient="shop@example.com")

    with caplog.at_level(logging.ERROR, logger="barberbook.notifications"):
        with patch.object(BookingNotifier, "send_email", side_effect=smtplib.SMTPException("down")):
            notifier.notify_booking(_booking())

    record = caplog.records[-1]
    assert record.args[0] == 5
    assert record.getMessage() == "❌ Confirmation email for booking 5 failed: down"


def test_send_email_uses_smtp():
    notifier = BookingNotifier(
        smtp_host="smtp.test",
        smtp_port=2525,
        smtp_username="user",
        smtp_password="pw",
        from_address="Shop <shop@example.com>",
    )

    with patch("barberbook.notifications.smtplib.SMTP") as smtp_cls:
        notifier.send_email("owner@example.com", "Hello")

    smtp_cls.assert_called_once_with("smtp.test", 2525, timeout=15)
    server = smtp_cls.return_value.__enter__.return_value
    server.login.assert_called_once_with("user", "pw")
    sent = server.send_message.call_args.args[0]
    assert sent["To"] == "owner@example.com"
    assert sent["Subject"] == "Your Barber Appointment"
