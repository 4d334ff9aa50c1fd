"""Main module entrypoint for local runtime execution.

This module validates startup configuration, binds the property holders and
launches the FastAPI service.
"""

import argparse
import logging

import uvicorn

from configmanager.bootstrap import bootstrap_create_application
from configmanager.config import config_load_settings, config_override_settings


def main() -> None:
    """Run the HTTP service with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when runtime settings validation fails.
        ConfigurationError: Raised when the properties source cannot be bound.
    """

    argument_parser = argparse.ArgumentParser(description="Config Manager runtime entrypoint")
    argument_parser.add_argument(
        "--properties-file",
        dest="properties_file",
        type=str,
        help="Optional override of the `.properties`/`.yml` source path",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    if parsed_arguments.properties_file is not None:
        settings = config_override_settings(settings, properties_file=parsed_arguments.properties_file)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger(__name__).info("Starting Config Manager in %s mode", settings.environment_name)

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
