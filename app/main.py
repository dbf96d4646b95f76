"""Main module entrypoint for local runtime execution.

This module validates startup configuration, configures logging and either
launches the FastAPI service or prints one analytics report.
"""

import argparse
import json
import logging

import uvicorn

from app.api.serializers import api_serialize_analytics_result
from app.bootstrap import bootstrap_create_application, bootstrap_create_item_service
from app.config import AppSettings, config_load_settings
from app.domain import domain_parse_timestamp_utc

logger = logging.getLogger(__name__)


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 2 when report arguments are invalid.
    """

    argument_parser = argparse.ArgumentParser(description="Finance tracker runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "analytics-report"),
        help="Runtime command: `api` starts server, `analytics-report` prints range analytics as JSON",
        type=str,
    )
    argument_parser.add_argument(
        "--from",
        dest="date_from",
        type=str,
        help="Inclusive RFC 3339 lower bound for `analytics-report`",
    )
    argument_parser.add_argument(
        "--to",
        dest="date_to",
        type=str,
        help="Inclusive RFC 3339 upper bound for `analytics-report`",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    main_configure_logging(settings)

    if parsed_arguments.command == "analytics-report":
        if not parsed_arguments.date_from or not parsed_arguments.date_to:
            argument_parser.error("analytics-report requires --from and --to")
        try:
            date_from = domain_parse_timestamp_utc(parsed_arguments.date_from)
            date_to = domain_parse_timestamp_utc(parsed_arguments.date_to)
            item_service = bootstrap_create_item_service(settings)
            result = item_service.ledger_analytics_compute(date_from=date_from, date_to=date_to)
        except ValueError as error:
            argument_parser.error(str(error))
        print(json.dumps(api_serialize_analytics_result(result)))
        return

    application = bootstrap_create_application(settings)
    logger.info(
        "server.start host=%s port=%s environment=%s",
        settings.application_host,
        settings.application_port,
        settings.environment_name,
    )
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


def main_configure_logging(settings: AppSettings) -> None:
    """Configure root logging from validated settings.

    Args:
        settings: Validated runtime settings.
    """

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


if __name__ == "__main__":
    main()
