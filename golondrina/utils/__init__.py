"""Temporal helpers and configuration for the ticket office."""
