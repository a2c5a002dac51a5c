"""
SMS Service using Twilio
Sends booking confirmations and cancellation notices
"""
import logging
from twilio.rest import Client
from app.config import Settings
from app.models import Booking

logger = logging.getLogger(__name__)


class TwilioService:
    """Service to send SMS using Twilio"""

    def __init__(self, settings: Settings):
        self.account_sid = settings.twilio_account_sid
        self.auth_token = settings.twilio_auth_token
        self.phone_number = settings.twilio_phone_number
        self.restaurant_name = settings.restaurant_name
        self.client = None
        self._init_client()

    def _init_client(self):
        """Initialize Twilio client"""
        try:
            if self.account_sid and self.auth_token:
                self.client = Client(self.account_sid, self.auth_token)
        except Exception as e:
            logger.warning("Failed to initialize Twilio: %s", e)

    def send_sms(self, to_number: str, message: str) -> dict:
        """
        Send SMS using Twilio.

        Args:
            to_number: Recipient phone number
            message: Message to send

        Returns:
            dict with SMS status
        """
        try:
            if not self.client:
                logger.info("Twilio not configured, would send to %s: %s", to_number, message)
                return {
                    "status": "success",
                    "to": to_number,
                    "message": message,
                    "note": "Twilio not configured - running in test mode"
                }

            sms = self.client.messages.create(
                body=message,
                from_=self.phone_number,
                to=to_number
            )
            logger.info("SMS sent to %s (sid %s)", to_number, sms.sid)

            return {
                "status": "success",
                "to": to_number,
                "message": message,
                "sid": sms.sid
            }

        except Exception as e:
            logger.error("Error sending SMS to %s: %s", to_number, e)
            return {
                "status": "error",
                "message": f"Error sending SMS: {str(e)}"
            }

    def send_booking_confirmation(self, booking: Booking) -> dict:
        """Confirm a new reservation to the customer"""
        party = "1 guest" if booking.guests == 1 else f"{booking.guests} guests"
        message = (
            f"{self.restaurant_name}: your table for {party} on {booking.date} at {booking.time} "
            f"is confirmed. Booking ID: {booking.id}"
        )
        return self.send_sms(booking.phone, message)

    def send_cancellation_notice(self, booking: Booking) -> dict:
        """Tell the customer their reservation was cancelled"""
        message = (
            f"{self.restaurant_name}: your reservation on {booking.date} at {booking.time} "
            f"has been cancelled."
        )
        return self.send_sms(booking.phone, message)
