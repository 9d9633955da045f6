"""Dry-run dispatcher: logs the message, never contacts the gateway."""

import logging

from weathersms.config.schema import Credentials
from weathersms.errors import AlreadyDispatchedError
from weathersms.models.delivery import DispatchResult, OutboundMessage

logger = logging.getLogger(__name__)

DRY_RUN_STATUS = "dry-run"


class DryRunDispatcher:
    def __init__(self, credentials: Credentials):
        self.sender = credentials.twilio_from
        self.recipient = credentials.twilio_to
        self.sent: list[OutboundMessage] = []

    def build_message(self, body: str) -> OutboundMessage:
        return OutboundMessage(body=body, sender=self.sender, recipient=self.recipient)

    def send(self, message: OutboundMessage) -> DispatchResult:
        if self.sent:
            raise AlreadyDispatchedError("This dispatcher has already sent its message")
        self.sent.append(message)
        logger.info(
            "DRY-RUN: SMS from %s to %s:\n%s",
            message.sender, message.recipient, message.body,
        )
        return DispatchResult(sid=None, status=DRY_RUN_STATUS)
