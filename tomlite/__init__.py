"""Tokenizer, value model and conversion helpers for TOML."""

__version__ = "0.1.0"
__all__ = ["tokens", "tokenizer", "value", "convert"]