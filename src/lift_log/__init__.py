"""lift-log: gym set logger with personal records and progress charts."""

__version__ = "0.1.0"
