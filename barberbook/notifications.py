"""
Booking confirmation notifications.
An AI-written confirmation sentence, delivered by SMTP email.
Failures here are logged and never reach the booking flow.
"""
import logging
import smtplib
from email.mime.text import MIMEText
from typing import Optional

from openai import OpenAI, OpenAIError

from barberbook import config
from barberbook.models import Booking

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Thanks for booking!"
EMAIL_SUBJECT = "Your Barber Appointment"


class BookingNotifier:
    def __init__(
        self,
        openai_api_key: Optional[str] = None,
        openai_model: str = "gpt-4",
        smtp_host: Optional[str] = None,
        smtp_port: int = 587,
        smtp_username: Optional[str] = None,
        smtp_password: Optional[str] = None,
        from_address: str = "Barberbook <noreply@barberbook.local>",
        recipient: Optional[str] = None,
        openai_client: Optional[OpenAI] = None,
    ):
        self.openai_api_key = openai_api_key
        self.openai_model = openai_model
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_username = smtp_username
        self.smtp_password = smtp_password
        self.from_address = from_address
        self.recipient = recipient
        self.openai_client = openai_client

    @classmethod
    def from_config(cls) -> "BookingNotifier":
        return cls(
            openai_api_key=config.OPENAI_API_KEY,
            openai_model=config.OPENAI_MODEL,
            smtp_host=config.SMTP_HOST,
            smtp_port=config.SMTP_PORT,
            smtp_username=config.SMTP_USERNAME,
            smtp_password=config.SMTP_PASSWORD,
            from_address=config.EMAIL_FROM_ADDRESS,
            recipient=config.NOTIFY_EMAIL,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.smtp_host and self.recipient)

    def _get_openai_client(self) -> Optional[OpenAI]:
        if self.openai_client is None and self.openai_api_key:
            self.openai_client = OpenAI(api_key=self.openai_api_key, timeout=15.0)
        return self.openai_client

    def generate_message(self, customer_name: str, date: str, time: str) -> str:
        """Ask the chat model for a short confirmation; fall back to a fixed line."""
        client = self._get_openai_client()
        if client is None:
            return FALLBACK_MESSAGE

        try:
            response = client.chat.completions.create(
                model=self.openai_model,
                messages=[
                    {"role": "system", "content": "You are a polite and friendly assistant at a barber shop."},
                    {
                        "role": "user",
                        "content": (
                            f"A customer named {customer_name} booked for {date} at {time}. "
                            "Write a short, friendly confirmation message."
                        ),
                    },
                ],
            )
        except OpenAIError as e:
            logger.error("❌ Confirmation message generation failed: %s", e)
            return FALLBACK_MESSAGE

        if not response.choices:
            return FALLBACK_MESSAGE
        return response.choices[0].message.content or FALLBACK_MESSAGE

    def send_email(self, to: str, message: str) -> None:
        msg = MIMEText(message)
        msg["Subject"] = EMAIL_SUBJECT
        msg["From"] = self.from_address
        msg["To"] = to

        with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=15) as server:
            server.starttls()
            if self.smtp_username:
                server.login(self.smtp_username, self.smtp_password or "")
            server.send_message(msg)

    def notify_booking(self, booking: Booking) -> None:
        """Fire-and-forget confirmation for a newly created booking."""
        if not self.enabled:
            logger.debug("Notifications not configured, skipping booking %s", booking.id)
            return

        message = self.generate_message(booking.customer_name, booking.date, booking.time)
        try:
            self.send_email(self.recipient, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("❌ Confirmation email for booking %s failed: %s", booking.id, e)
            return
        logger.info("✅ Confirmation email sent for booking %s", booking.id)
