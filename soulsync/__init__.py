"""
SoulSync - the service core of a mental-wellness companion.

This package provides keyword-based mood detection, mood-adaptive chat
responses with optional LLM augmentation, and a therapist finder that filters
and ranks providers by great-circle distance.
"""

__version__ = "0.1.0"
