"""Utility helpers shared across netwalk."""
