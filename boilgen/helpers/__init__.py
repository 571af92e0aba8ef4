"""Helper utilities for the boilgen CLI."""
