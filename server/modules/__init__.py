"""Configuration and domain modules."""
