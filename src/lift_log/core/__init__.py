"""Core models, constants, templates and charts for lift-log."""
