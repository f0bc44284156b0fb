"""FastAPI dependencies for workplanner."""

from datetime import datetime, timezone


def get_now() -> datetime:
    """Planning instant for a request.

    Tests override this through `app.dependency_overrides` to pin the clock.
    """
    return datetime.now(timezone.utc)
