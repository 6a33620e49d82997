"""Helper utilities for mvxkit."""
