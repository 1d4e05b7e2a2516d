"""Adapters – HTTP client and FastAPI surface."""
