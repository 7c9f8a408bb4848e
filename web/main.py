"""Web application entry point"""

import uvicorn

from config import settings
from utils.log import configure_logging

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    uvicorn.run(
        "web.api:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
