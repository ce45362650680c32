"""Schemas — Pydantic models for the AO message and response wire shapes."""
