"""Readers for llm's log databases."""

from .service import LogStore, extract_cost

__all__ = ["LogStore", "extract_cost"]
