"""Adapters — framework glue around the domain layer."""
