"""Outbound SMS and gateway response models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OutboundMessage:
    body: str
    sender: str
    recipient: str


@dataclass(frozen=True)
class DispatchResult:
    sid: str | None
    status: str | None
    error_code: int | str | None = None
    error_message: str | None = None

    @property
    def failed(self) -> bool:
        """True when the gateway embedded an error in an otherwise successful reply."""
        return self.error_code is not None or self.error_message is not None
