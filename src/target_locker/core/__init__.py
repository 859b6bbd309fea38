"""Ports and the explicit application state container."""
