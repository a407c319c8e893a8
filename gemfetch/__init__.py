"""Minimal Gemini protocol client."""

__version__ = "0.1.0"
