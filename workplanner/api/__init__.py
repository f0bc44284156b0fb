"""HTTP surface for workplanner."""
