"""Main entry point for the Jibri event service."""

import uvicorn
from dotenv import find_dotenv, load_dotenv

from jibri_events.api import create_fastapi_app
from jibri_events.config import get_api_address
from jibri_events.logging_config import setup_logging


def main():
    """Run the application."""
    # .env is looked up from the working directory, not the installed package
    load_dotenv(find_dotenv(usecwd=True))
    setup_logging()

    api_host, api_port = get_api_address()

    app = create_fastapi_app()

    uvicorn.run(
        app,
        host=api_host,
        port=api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
