"""Run outcome models and the exit status each outcome maps to."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from weathersms.models.delivery import DispatchResult


class ExitCode(IntEnum):
    OK = 0
    CONFIGURATION_ERROR = 1
    DELIVERY_ERROR = 2
    FETCH_ERROR = 3
    TRANSPORT_ERROR = 4
    UNEXPECTED_ERROR = 5


class RunOutcome(StrEnum):
    SENT = "sent"
    DRY_RUN = "dry_run"
    CONFIGURATION_ERROR = "configuration_error"
    FETCH_ERROR = "fetch_error"
    DISPATCH_TRANSPORT_ERROR = "dispatch_transport_error"
    DISPATCH_LOGICAL_ERROR = "dispatch_logical_error"
    UNEXPECTED_ERROR = "unexpected_error"


EXIT_CODES: dict[RunOutcome, ExitCode] = {
    RunOutcome.SENT: ExitCode.OK,
    RunOutcome.DRY_RUN: ExitCode.OK,
    RunOutcome.CONFIGURATION_ERROR: ExitCode.CONFIGURATION_ERROR,
    RunOutcome.FETCH_ERROR: ExitCode.FETCH_ERROR,
    RunOutcome.DISPATCH_TRANSPORT_ERROR: ExitCode.TRANSPORT_ERROR,
    RunOutcome.DISPATCH_LOGICAL_ERROR: ExitCode.DELIVERY_ERROR,
    RunOutcome.UNEXPECTED_ERROR: ExitCode.UNEXPECTED_ERROR,
}


@dataclass(frozen=True)
class RunResult:
    outcome: RunOutcome
    body: str | None = None
    dispatch: DispatchResult | None = None
    error: Exception | None = None

    @property
    def exit_code(self) -> ExitCode:
        return EXIT_CODES[self.outcome]

    @property
    def ok(self) -> bool:
        return self.exit_code == ExitCode.OK
