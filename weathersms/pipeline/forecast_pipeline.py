"""Forecast pipeline: fetch -> format -> dispatch -> inspect, once per run."""

import logging
from datetime import timedelta
from typing import Protocol

from weathersms.errors import DispatchLogicalError, DispatchTransportError, FetchError
from weathersms.ingest.forecast_fetcher import ForecastFetcher
from weathersms.models.common import local_utc_offset
from weathersms.models.delivery import DispatchResult, OutboundMessage
from weathersms.models.run import RunOutcome, RunResult
from weathersms.reporting.formatters import format_summary

logger = logging.getLogger(__name__)


class Dispatcher(Protocol):
    def build_message(self, body: str) -> OutboundMessage: ...

    def send(self, message: OutboundMessage) -> DispatchResult: ...


class ForecastPipeline:
    def __init__(
        self,
        fetcher: ForecastFetcher,
        dispatcher: Dispatcher,
        offset: timedelta | None = None,
        dry_run: bool = False,
    ):
        self.fetcher = fetcher
        self.dispatcher = dispatcher
        self.offset = offset
        self.dry_run = dry_run

    def run(self) -> RunResult:
        """Execute one run. Every failure is logged and mapped to a RunOutcome."""
        body: str | None = None
        try:
            # 1. FETCH
            forecast = self.fetcher.fetch()

            # 2. FORMAT
            offset = self.offset if self.offset is not None else local_utc_offset()
            body = format_summary(forecast, offset)
            logger.debug("Message body:\n%s", body)

            # 3. DISPATCH
            message = self.dispatcher.build_message(body)
            result = self.dispatcher.send(message)

            # 4. INSPECT
            if result.failed:
                raise DispatchLogicalError(result.error_code, result.error_message)

        except FetchError as e:
            logger.error("Forecast fetch failed: %s", e)
            return RunResult(RunOutcome.FETCH_ERROR, body=body, error=e)
        except DispatchTransportError as e:
            logger.error("SMS dispatch failed: %s", e)
            return RunResult(RunOutcome.DISPATCH_TRANSPORT_ERROR, body=body, error=e)
        except DispatchLogicalError as e:
            logger.error("Error code    : %s", e.code)
            logger.error("Error message : %s", e.message)
            return RunResult(
                RunOutcome.DISPATCH_LOGICAL_ERROR, body=body, dispatch=result, error=e
            )
        except Exception as e:
            logger.exception("Unexpected failure during forecast run")
            return RunResult(RunOutcome.UNEXPECTED_ERROR, body=body, error=e)

        outcome = RunOutcome.DRY_RUN if self.dry_run else RunOutcome.SENT
        logger.info("Run complete: %s (sid=%s, status=%s)", outcome, result.sid, result.status)
        return RunResult(outcome, body=body, dispatch=result)
