"""Domain dataclasses and API schemas for college applications."""
