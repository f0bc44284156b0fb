"""Runtime settings for workplanner.

Values come from the environment (optionally a local `.env` file). Scheduling
weights are not configured here; see `workplanner.engine.config`.
"""

import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("WORKPLANNER_HOST", "0.0.0.0")
PORT = int(os.getenv("WORKPLANNER_PORT", "8000"))
RELOAD = os.getenv("WORKPLANNER_RELOAD", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Default IANA time zone used for day boundaries when a request omits one
DEFAULT_TIMEZONE = os.getenv("WORKPLANNER_DEFAULT_TIMEZONE", "UTC")
