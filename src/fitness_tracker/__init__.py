"""fitness-tracker: local-first workout, diet and progress logging."""

__version__ = "0.1.0"
