"""Lifehacking admin backend (FastAPI application package)."""
