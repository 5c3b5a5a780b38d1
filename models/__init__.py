"""Pydantic models for repositories and skills."""
