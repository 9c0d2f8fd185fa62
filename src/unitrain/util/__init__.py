"""Small helpers shared across backends."""
