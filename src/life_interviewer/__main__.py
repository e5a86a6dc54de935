"""Life Interviewer server entry point."""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from .api import create_app
from .config import get_settings

logger = logging.getLogger(__name__)


def main():
    """Run the Life Interviewer server."""
    try:
        settings = get_settings()
    except ValidationError as e:
        missing = [".".join(str(part) for part in err["loc"]).upper() for err in e.errors()]
        logger.error(f"Invalid configuration, check environment variables: {', '.join(missing)}")
        sys.exit(1)

    app = create_app(settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
