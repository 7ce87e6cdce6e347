"""
Outcome values returned by the REST layer.

Every call made through :class:`~atlassian_console.rest.client.RestClient`
returns exactly one of these values instead of raising:

- ``Success``: 2xx with a decoded payload
- ``EmptyOk``: 2xx where the body is absent or deliberately ignored
- ``Failure``: transport error, timeout, non-2xx status or undecodable body
"""

from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class FailureKind(str, Enum):
    """Reasons a REST call did not succeed."""

    TRANSPORT = "TransportError"
    TIMEOUT = "TimeoutError"
    HTTP = "HttpError"
    DECODE = "DecodeError"


class Success(BaseModel, Generic[T]):
    """A 2xx response whose body was decoded into ``payload``."""

    model_config = {"frozen": True}

    payload: T
    status_code: int = 200

    ok: ClassVar[bool] = True


class EmptyOk(BaseModel):
    """A 2xx response with no body, or one the caller chose not to parse."""

    model_config = {"frozen": True}

    status_code: int = 204

    ok: ClassVar[bool] = True


class Failure(BaseModel):
    """A call that did not produce a usable 2xx response.

    ``status_code`` is only set for ``HttpError`` and ``DecodeError``;
    ``body`` holds the raw response text when one was received.
    """

    model_config = {"frozen": True}

    kind: FailureKind
    status_code: int | None = None
    body: str = ""
    message: str = ""

    ok: ClassVar[bool] = False

    @property
    def is_not_found(self) -> bool:
        return self.kind is FailureKind.HTTP and self.status_code == 404

    def __str__(self) -> str:
        text = self.kind.value
        if self.status_code is not None:
            text += f" (status {self.status_code})"
        if self.message:
            text += f": {self.message}"
        return text


Outcome = Union[Success[T], EmptyOk, Failure]


def payload_or(outcome: "Outcome[T]", default: Any = None) -> Any:
    """Return the decoded payload of a ``Success`` or ``default`` otherwise."""
    if isinstance(outcome, Success):
        return outcome.payload
    return default
