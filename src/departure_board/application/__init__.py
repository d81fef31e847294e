"""Application layer - board use cases."""
