"""College application intake and ranking service."""

__version__ = "0.1.0"
