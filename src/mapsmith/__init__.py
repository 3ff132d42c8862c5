"""MapSmith - column-to-placeholder mapping and validation for message templates."""

__version__ = "0.1.0"
