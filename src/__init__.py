"""Crop advisor."""
