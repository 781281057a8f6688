"""workout-tracker: exercise library, workout log and volume reports."""

__version__ = "0.1.0"
