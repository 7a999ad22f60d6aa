"""
API package containing versioned routes.

Each version subpackage (e.g. ``v1``) exposes a top‑level ``router``
which includes all of its resource endpoints.
"""
