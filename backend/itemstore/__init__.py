"""JSON record store service."""
