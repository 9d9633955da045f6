"""CLI entry point: send this morning's forecast as an SMS."""

import argparse
import logging

from weathersms.config.loader import load_config, load_credentials, load_env_file
from weathersms.config.schema import AppConfig
from weathersms.delivery.dry_run import DryRunDispatcher
from weathersms.delivery.sms_dispatcher import SmsDispatcher
from weathersms.errors import ConfigurationError
from weathersms.ingest.darksky_client import DarkSkyClient
from weathersms.ingest.forecast_fetcher import ForecastFetcher
from weathersms.models.run import ExitCode
from weathersms.pipeline.forecast_pipeline import ForecastPipeline

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weather-sms",
        description="Fetch today's forecast and send it as a text message",
    )
    parser.add_argument("--config", default=None, help="Optional YAML settings path")
    parser.add_argument(
        "--env-file", default=None, help="dotenv file to read credentials from"
    )
    parser.add_argument(
        "--log-level", default=None, help="Override the configured log level"
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Log the message instead of sending it"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        config = load_config(args.config)
        if args.log_level:
            config = AppConfig.model_validate(
                {**config.model_dump(), "log_level": args.log_level}
            )
        logging.getLogger().setLevel(config.log_level)

        if args.env_file:
            load_env_file(args.env_file)
        credentials = load_credentials()
    except (ConfigurationError, ValueError) as e:
        logger.error("%s", e)
        return ExitCode.CONFIGURATION_ERROR

    client = DarkSkyClient(
        base_url=config.forecast_api.base_url,
        timeout=config.forecast_api.timeout,
    )
    fetcher = ForecastFetcher(client, credentials)
    if args.dry_run:
        dispatcher = DryRunDispatcher(credentials)
    else:
        dispatcher = SmsDispatcher(credentials)

    result = ForecastPipeline(fetcher, dispatcher, dry_run=args.dry_run).run()
    return result.exit_code
