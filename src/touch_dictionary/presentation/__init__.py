"""Presentation layer - CLI and desktop-shell bridge."""
