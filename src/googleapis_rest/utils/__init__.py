"""Utility helpers shared by the API clients."""
