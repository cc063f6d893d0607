"""API routes that are not owned by a feature module."""
