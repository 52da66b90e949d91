"""
Adapters package - External service connections.
"""

from adapters import klarna_adapter

__all__ = ["klarna_adapter"]
