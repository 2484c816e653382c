"""Core package - shared exceptions."""
from .exceptions import ErgoScoreException, UnknownMethodError

__all__ = [
    "ErgoScoreException",
    "UnknownMethodError",
]
