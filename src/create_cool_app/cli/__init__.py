"""CLI helpers exposed for other modules."""

from .ui import select_with_arrows

__all__ = ["select_with_arrows"]
