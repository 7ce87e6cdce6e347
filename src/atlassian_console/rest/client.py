"""Request/response layer shared by the Jira and Confluence clients.

Requests are dispatched through atlassian-python-api's ``request`` in advanced
mode, which hands back the raw ``requests.Response`` without raising. Status
interpretation and decoding happen here, and every result is returned as an
:mod:`~atlassian_console.rest.outcome` value.
"""

import base64
import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import requests
from atlassian.rest_client import AtlassianRestAPI
from requests import Session

from .outcome import EmptyOk, Failure, FailureKind, Outcome, Success

logger = logging.getLogger("atlassian-console.rest")

T = TypeVar("T")

Decoder = Callable[[Any], T]

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def basic_auth_header(email: str, api_token: str) -> str:
    """Build the ``Authorization`` header value for Atlassian Cloud Basic Auth."""
    credentials = f"{email}:{api_token}".encode()
    return f"Basic {base64.b64encode(credentials).decode('ascii')}"


def create_session(email: str, api_token: str) -> Session:
    """Create a session that sends Basic Auth and JSON headers on every request.

    The header is computed once here; callers never touch it afterwards.
    """
    session = Session()
    session.headers.update(JSON_HEADERS)
    session.headers["Authorization"] = basic_auth_header(email, api_token)
    return session


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class RestClient:
    """Issues GET/POST/PUT/DELETE calls against one Atlassian product API.

    Base URL, credentials and timeout belong to the wrapped
    ``AtlassianRestAPI`` instance and are fixed once it is constructed.

    Two families of operations exist:

    - ``get``/``post`` decode the body (JSON, then the caller's decoder)
    - ``post_no_content``/``put``/``delete`` judge success by status only,
      which is what endpoints answering ``204 No Content`` need
    """

    def __init__(
        self, api: AtlassianRestAPI, service_name: str, api_prefix: str = ""
    ) -> None:
        self._api = api
        self.service_name = service_name
        self.api_prefix = api_prefix.strip("/")

    @property
    def base_url(self) -> str:
        return self._api.url

    @property
    def timeout(self) -> float:
        return self._api.timeout

    def get(
        self,
        path: str,
        decoder: Decoder | None = None,
        params: dict[str, Any] | None = None,
    ) -> Outcome:
        """GET ``path`` and decode the JSON body.

        Args:
            path: Path relative to the API prefix
            decoder: Callable turning parsed JSON into the expected type;
                raw JSON is returned when omitted
            params: Optional query parameters

        Returns:
            Success with the decoded payload, EmptyOk for 204, or Failure
        """
        response = self._dispatch("GET", path, params=params)
        if isinstance(response, Failure):
            return response
        return self._decode("GET", path, response, decoder)

    def post(self, path: str, body: Any, decoder: Decoder | None = None) -> Outcome:
        """POST a JSON body to ``path`` and decode the JSON response."""
        response = self._dispatch("POST", path, body=body)
        if isinstance(response, Failure):
            return response
        return self._decode("POST", path, response, decoder)

    def post_no_content(self, path: str, body: Any) -> Outcome:
        """POST a JSON body where success is decided by the status alone.

        Used for endpoints such as issue transitions that reply
        ``204 No Content``.
        """
        response = self._dispatch("POST", path, body=body)
        if isinstance(response, Failure):
            return response
        return self._status_only("POST", path, response)

    def put(self, path: str, body: Any) -> Outcome:
        """PUT a JSON body to ``path``; the response body is never parsed."""
        response = self._dispatch("PUT", path, body=body)
        if isinstance(response, Failure):
            return response
        return self._status_only("PUT", path, response)

    def delete(self, path: str) -> Outcome:
        """DELETE ``path``; the response body is never parsed."""
        response = self._dispatch("DELETE", path)
        if isinstance(response, Failure):
            return response
        return self._status_only("DELETE", path, response)

    def _resolve(self, path: str) -> str:
        path = path.lstrip("/")
        if not self.api_prefix:
            return path
        return f"{self.api_prefix}/{path}"

    def _dispatch(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> requests.Response | Failure:
        resolved = self._resolve(path)
        if body is not None:
            logger.debug(
                f"{self.service_name} {method} {resolved} payload: "
                f"{json.dumps(body, default=str)}"
            )
        else:
            logger.debug(f"{self.service_name} {method} {resolved}")

        try:
            response = self._api.request(
                method=method,
                path=resolved,
                json=body,
                params=params,
                advanced_mode=True,
            )
        except requests.exceptions.Timeout as e:
            # ConnectTimeout is also a ConnectionError, so this must come first
            logger.error(
                f"{self.service_name} {method} {resolved} timed out after "
                f"{self.timeout}s: {e}"
            )
            return Failure(kind=FailureKind.TIMEOUT, message=str(e))
        except requests.exceptions.RequestException as e:
            logger.error(f"{self.service_name} {method} {resolved} failed: {e}")
            return Failure(kind=FailureKind.TRANSPORT, message=str(e))

        if not _is_success(response.status_code):
            logger.warning(
                f"{self.service_name} {method} {resolved} failed. "
                f"Status: {response.status_code}, Content: {response.text}"
            )
            return Failure(
                kind=FailureKind.HTTP,
                status_code=response.status_code,
                body=response.text,
                message=response.reason or "",
            )
        return response

    def _decode(
        self,
        method: str,
        path: str,
        response: requests.Response,
        decoder: Decoder | None,
    ) -> Outcome:
        resolved = self._resolve(path)
        if response.status_code == 204:
            logger.info(f"{self.service_name} {method} {resolved} -> 204 (no content)")
            return EmptyOk(status_code=204)

        raw = response.text
        try:
            data = response.json()
            payload = decoder(data) if decoder is not None else data
        except (ValueError, TypeError, KeyError) as e:
            logger.error(
                f"{self.service_name} {method} {resolved} returned "
                f"{response.status_code} but the body could not be decoded: {e}. "
                f"Raw response: {raw}"
            )
            return Failure(
                kind=FailureKind.DECODE,
                status_code=response.status_code,
                body=raw,
                message=str(e),
            )

        logger.info(f"{self.service_name} {method} {resolved} -> {response.status_code}")
        return Success(payload=payload, status_code=response.status_code)

    def _status_only(
        self, method: str, path: str, response: requests.Response
    ) -> Outcome:
        # Drained for logging only
        raw = response.text
        logger.info(
            f"{self.service_name} {method} {self._resolve(path)} -> "
            f"{response.status_code}"
        )
        if raw:
            logger.debug(f"Ignored response body: {raw}")
        return EmptyOk(status_code=response.status_code)
