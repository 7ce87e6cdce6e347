"""Preprocessing modules for converting between Atlassian text formats."""

from .adf import decode_rich_text, text_to_adf

__all__ = [
    "decode_rich_text",
    "text_to_adf",
]
