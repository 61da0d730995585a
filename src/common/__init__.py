"""Shared helpers: HTTP transport, errors and logging."""
