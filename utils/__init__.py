"""Configuration and persistence helpers."""
