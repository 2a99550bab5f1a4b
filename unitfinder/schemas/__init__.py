"""Pydantic schemas for health probes and search request payloads."""
