"""Integrations with persistence and serialization libraries."""
