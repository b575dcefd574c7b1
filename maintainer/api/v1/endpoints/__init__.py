"""API v1 endpoint modules (one router per entity family plus health)."""
