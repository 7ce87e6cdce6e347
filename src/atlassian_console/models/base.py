"""
Base models and utility classes for the Atlassian API models.

This module provides base classes and mixins that are used by the
Jira and Confluence models to ensure consistent behavior and reduce
code duplication.
"""

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel

from ..utils import parse_date
from .constants import EMPTY_STRING

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.

    ``from_api_response`` is lenient and fills defaults for anything missing,
    which suits nested objects. ``decode`` and ``decode_list`` are the strict
    entry points handed to the REST layer as decoders: they reject bodies
    that do not have the expected shape so the caller receives a
    ``DecodeError`` instead of an empty model.
    """

    # Keys a top-level response must carry to be accepted by ``decode``
    required_keys: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    @classmethod
    def decode(cls: type[T], data: Any, **kwargs: Any) -> T:
        """
        Strictly convert a top-level response body to a model instance.

        Args:
            data: Parsed JSON body
            **kwargs: Passed through to ``from_api_response``

        Returns:
            An instance of the model

        Raises:
            TypeError: If the body is not a JSON object
            KeyError: If a required key is absent
        """
        if not isinstance(data, dict):
            raise TypeError(
                f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
            )
        for key in cls.required_keys:
            if key not in data:
                raise KeyError(f"{cls.__name__} response is missing '{key}'")
        return cls.from_api_response(data, **kwargs)

    @classmethod
    def decode_list(cls: type[T], data: Any, **kwargs: Any) -> list[T]:
        """
        Strictly convert a top-level JSON array to a list of model instances.

        Raises:
            TypeError: If the body or one of its items has the wrong shape
            KeyError: If an item lacks a required key
        """
        if not isinstance(data, list):
            raise TypeError(
                f"Expected a JSON array of {cls.__name__}, got {type(data).__name__}"
            )
        return [cls.decode(item, **kwargs) for item in data]

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary for display and export.

        Returns:
            A dictionary with only the essential fields
        """
        return self.model_dump(exclude_none=True)


class TimestampMixin:
    """
    Mixin for handling Atlassian API timestamp formats.
    """

    @staticmethod
    def format_timestamp(timestamp: str | None) -> str:
        """
        Format an Atlassian timestamp to a human-readable format.

        Args:
            timestamp: An ISO 8601 timestamp string

        Returns:
            A formatted date string, the input itself if it cannot be parsed,
            or an empty string if there is no input
        """
        if not timestamp:
            return EMPTY_STRING

        dt = parse_date(timestamp)
        if dt is None:
            return timestamp
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    @staticmethod
    def is_valid_timestamp(timestamp: str | None) -> bool:
        """Check whether a string parses as an Atlassian timestamp."""
        return parse_date(timestamp) is not None
