"""Content shaping helpers for The Curry Club website."""
