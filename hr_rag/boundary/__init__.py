"""Boundary layer: database, similarity search, and object storage adapters."""
