"""Application layer — use cases orchestrating domain and infrastructure."""
