"""Core module pour block_engine."""
from .schemas import BlockNode

__all__ = ["BlockNode"]
