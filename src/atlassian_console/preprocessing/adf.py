"""Atlassian Document Format (ADF) conversion helpers.

Jira Cloud returns rich-text fields such as issue descriptions and comment
bodies either as legacy plain strings or as ADF trees::

    {"type": "doc", "version": 1, "content": [
        {"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]}
    ]}

Reference: https://developer.atlassian.com/cloud/jira/platform/apis/document/structure/
"""

import logging
from typing import Any

logger = logging.getLogger("atlassian-console.preprocessing.adf")

ADF_VERSION = 1


def decode_rich_text(value: Any) -> str:
    """Flatten a rich-text field value into a display string.

    - strings are returned unchanged
    - ``None`` becomes an empty string
    - objects are read as ADF documents: text runs are concatenated verbatim
      and every paragraph ends with a line break; the result is stripped
    - anything else (numbers, booleans, top-level lists) becomes an empty
      string

    Node kinds other than ``text`` and ``paragraph`` contribute only the text
    of their children, so new block types never break decoding.

    Args:
        value: Any JSON value bound to a description-like field

    Returns:
        The flattened text. This function never raises.
    """
    if isinstance(value, str):
        return value
    if not isinstance(value, dict):
        if value is not None:
            logger.debug(f"Ignoring rich-text value of type {type(value).__name__}")
        return ""

    output: list[str] = []
    _walk_content(value.get("content"), output)
    return "".join(output).strip()


def _walk_content(content: Any, output: list[str]) -> None:
    if not isinstance(content, list):
        return
    for node in content:
        _walk_node(node, output)


def _walk_node(node: Any, output: list[str]) -> None:
    if not isinstance(node, dict):
        return

    node_type = node.get("type")
    if node_type == "text":
        text = node.get("text")
        if isinstance(text, str):
            output.append(text)
        return

    children = node.get("content")
    if not isinstance(children, list):
        return

    _walk_content(children, output)
    if node_type == "paragraph":
        output.append("\n")


def text_to_adf(text: str) -> dict[str, Any]:
    """Wrap plain text in a single-paragraph ADF document for write payloads."""
    return {
        "type": "doc",
        "version": ADF_VERSION,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}],
            }
        ],
    }
