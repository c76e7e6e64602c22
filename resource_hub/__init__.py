"""Resource Hub: mental health support resource recommendations."""

__version__ = "0.1.0"
