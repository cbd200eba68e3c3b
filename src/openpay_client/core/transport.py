"""
JSON-over-HTTP dispatcher shared by every resource.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, Callable, List, Mapping, Optional, TypeVar

import requests

from .config import ClientConfig, valid_timeout
from .errors import (
    DeserializationError,
    classify_response,
    classify_transport_failure,
)

__all__ = ["Decoder", "JsonTransportClient"]

E = TypeVar("E")
Decoder = Callable[[Mapping[str, Any]], E]


def _parse_json(text: str) -> Any:
    return json.loads(text, parse_float=Decimal)


def _decode_entity(payload: Any, decoder: Decoder, text: str) -> E:
    if not isinstance(payload, Mapping):
        raise DeserializationError(
            f"Expected a JSON object, got {type(payload).__name__}", body=text
        )
    try:
        return decoder(payload)
    except DeserializationError:
        raise
    except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
        raise DeserializationError(
            f"Response does not match the expected entity: {exc}", body=text
        ) from exc


class JsonTransportClient:
    """
    Performs one HTTP round trip per call and maps the outcome to an entity
    or an exception.

    ``session`` can be any object with a ``requests.Session``-compatible
    ``request`` method. Nothing is retried or cached here.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.config.base_url}{path}"

    def _send(
        self,
        method: str,
        path: str,
        *,
        body: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        if timeout is not None and not valid_timeout(timeout):
            raise ValueError(f"timeout must be a finite number greater than zero, got {timeout!r}")
        url = self.url_for(path)
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        data = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            data = json.dumps(body)

        logging.info("Openpay %s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                params=dict(query) if query else None,
                data=data,
                headers=headers,
                auth=self.config.auth,
                timeout=timeout if timeout is not None else self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            error = classify_transport_failure(exc)
            logging.warning("Openpay %s %s failed: %s", method, url, error)
            raise error from exc

        logging.debug("Openpay %s %s -> %s", method, url, response.status_code)
        if not 200 <= response.status_code < 300:
            raise self._error_for(method, url, response)
        return response

    def _error_for(self, method: str, url: str, response: requests.Response):
        text = response.text or ""
        try:
            body = _parse_json(text) if text.strip() else None
        except ValueError:
            body = None
        error = classify_response(response.status_code, body, raw_text=text)
        logging.warning("Openpay %s %s rejected: %s", method, url, error)
        return error

    def _json_body(self, response: requests.Response) -> Any:
        text = response.text or ""
        if not text.strip():
            raise DeserializationError("Expected a JSON body, got an empty response", body=text)
        try:
            return _parse_json(text)
        except ValueError as exc:
            raise DeserializationError(
                f"Failed to parse JSON response body: {exc}", body=text
            ) from exc

    def create(
        self,
        path: str,
        params: Optional[Mapping[str, Any]],
        decoder: Decoder,
        *,
        timeout: Optional[float] = None,
    ) -> E:
        response = self._send("POST", path, body=params or {}, timeout=timeout)
        return _decode_entity(self._json_body(response), decoder, response.text)

    def fetch(
        self,
        path: str,
        decoder: Decoder,
        *,
        timeout: Optional[float] = None,
    ) -> E:
        response = self._send("GET", path, timeout=timeout)
        return _decode_entity(self._json_body(response), decoder, response.text)

    def list(
        self,
        path: str,
        filters: Optional[Mapping[str, str]],
        decoder: Decoder,
        *,
        timeout: Optional[float] = None,
    ) -> List[E]:
        response = self._send("GET", path, query=filters, timeout=timeout)
        payload = self._json_body(response)
        if not isinstance(payload, list):
            raise DeserializationError(
                f"Expected a JSON array, got {type(payload).__name__}", body=response.text
            )
        return [_decode_entity(item, decoder, response.text) for item in payload]

    def delete(self, path: str, *, timeout: Optional[float] = None) -> None:
        self._send("DELETE", path, timeout=timeout)
