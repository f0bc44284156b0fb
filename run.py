#!/usr/bin/env python3
"""Run script for workplanner."""

import logging

import uvicorn

from workplanner.config import HOST, PORT, RELOAD, LOG_LEVEL

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "workplanner.api.app:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_level=LOG_LEVEL.lower(),
    )
