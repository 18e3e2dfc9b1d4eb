"""AI weather planner: live weather with offline fallback and a planning assistant."""

__version__ = "0.1.0"
