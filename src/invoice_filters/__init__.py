"""Invoice filtering engine with a Reflex front end."""

__version__ = "0.1.0"
