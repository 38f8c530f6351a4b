"""Concrete adapters (vehicles and console output)."""
