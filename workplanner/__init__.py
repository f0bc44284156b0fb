"""workplanner - turns ranked academic work items into a day-by-day study plan."""

__version__ = "0.1.0"
