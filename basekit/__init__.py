"""Everyday string, splitting, byte-buffer, linked-chain, line-reading and output helpers."""

__version__ = "0.1.0"

__all__ = ["chain", "edit", "memory", "numbers", "output", "reader", "split", "strings"]