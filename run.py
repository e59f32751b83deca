#!/usr/bin/env python3
"""
Simple launcher script for the Study Scheduler API.
Run this from the root directory to start the application.
"""

import logging
import uvicorn

from study_scheduler.config import configure_logging, LOG_LEVEL

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    configure_logging()
    logger.info("Starting Study Scheduler API with auto-reload")
    logger.info("API Documentation: http://localhost:8000/docs")

    # Use import string format for reload to work properly
    uvicorn.run(
        "study_scheduler.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["study_scheduler"],
        log_level=LOG_LEVEL.lower()
    )
