"""Pronounceable encoding of integer pairs."""
from .core.gibber import decode, encode

__all__ = ["encode", "decode"]
