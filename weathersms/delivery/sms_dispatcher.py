"""Twilio SMS dispatcher. Sends one message per instance, never retries."""

import logging

from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.rest import Client

from weathersms.config.schema import Credentials
from weathersms.errors import AlreadyDispatchedError, DispatchTransportError
from weathersms.models.delivery import DispatchResult, OutboundMessage

logger = logging.getLogger(__name__)


class SmsDispatcher:
    """Thin wrapper around the Twilio Messages API.

    Transport failures raise DispatchTransportError. Errors Twilio embeds in an
    accepted message come back on the DispatchResult for the caller to check.
    """

    def __init__(self, credentials: Credentials, client: Client | None = None):
        self.sender = credentials.twilio_from
        self.recipient = credentials.twilio_to
        self.client = client or Client(credentials.twilio_account, credentials.twilio_token)
        self._sent = False

    def build_message(self, body: str) -> OutboundMessage:
        return OutboundMessage(body=body, sender=self.sender, recipient=self.recipient)

    def send(self, message: OutboundMessage) -> DispatchResult:
        if self._sent:
            raise AlreadyDispatchedError("This dispatcher has already sent its message")
        # Set before the call so a failed attempt is not repeated either.
        self._sent = True

        logger.info("Sending %d-character SMS to %s", len(message.body), message.recipient)
        try:
            sent = self.client.messages.create(
                body=message.body,
                from_=message.sender,
                to=message.recipient,
            )
        except TwilioRestException as e:
            logger.error("Twilio API %s: %s", e.status, e.msg)
            raise DispatchTransportError(f"HTTP {e.status}: {e.msg}", e.status) from e
        except (TwilioException, OSError) as e:
            logger.error("Twilio request failed: %s", e)
            raise DispatchTransportError(f"Request failed: {e}") from e

        return DispatchResult(
            sid=sent.sid,
            status=sent.status,
            error_code=sent.error_code,
            error_message=sent.error_message,
        )
