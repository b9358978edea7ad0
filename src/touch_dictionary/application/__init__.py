"""Application layer - use cases built on domain and infrastructure."""
