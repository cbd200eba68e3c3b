"""
Binding of the transport client to a single resource path.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, Generic, List, Mapping, Optional, TypeVar, Union
from urllib.parse import quote

from .encoding import RequestParams, encode_value
from .errors import EncodingError
from .search import SearchParams
from .transport import Decoder, JsonTransportClient

__all__ = ["ResourceOperations", "ResourceSpec"]

E = TypeVar("E")

_FORMATTER = string.Formatter()


@dataclass(frozen=True)
class ResourceSpec(Generic[E]):
    """
    Where a resource lives and how its entities are decoded.

    ``path_template`` uses ``{merchant_id}`` and any nested identifiers, e.g.
    ``/v1/{merchant_id}/customers/{customer_id}/cards``.
    """

    path_template: str
    decoder: Decoder

    @property
    def placeholders(self) -> tuple:
        return tuple(
            name for _, name, _, _ in _FORMATTER.parse(self.path_template) if name is not None
        )


class ResourceOperations(Generic[E]):
    """The four generic verbs, pre-scoped to one resource and merchant."""

    def __init__(
        self,
        client: JsonTransportClient,
        merchant_id: str,
        spec: ResourceSpec,
    ) -> None:
        self._client = client
        self._merchant_id = merchant_id
        self._spec = spec

    @property
    def client(self) -> JsonTransportClient:
        return self._client

    @property
    def merchant_id(self) -> str:
        return self._merchant_id

    @property
    def spec(self) -> ResourceSpec:
        return self._spec

    def resolve_path(self, resource_id: Optional[str] = None, **ids: Optional[str]) -> str:
        values = {"merchant_id": self._merchant_id}
        values.update({key: value for key, value in ids.items() if value is not None})

        missing = [name for name in self._spec.placeholders if name not in values]
        if missing:
            raise EncodingError(
                f"Path {self._spec.path_template!r} needs a value for: {', '.join(missing)}"
            )
        path = self._spec.path_template.format(
            **{key: quote(str(value), safe="") for key, value in values.items()}
        )
        if resource_id is not None:
            path = f"{path}/{quote(str(resource_id), safe='')}"
        return path

    def create(
        self,
        params: Union[RequestParams, Mapping[str, Any], None],
        *,
        timeout: Optional[float] = None,
        **ids: Optional[str],
    ) -> E:
        if params is None:
            body = None
        elif isinstance(params, RequestParams):
            body = params.as_map()
        else:
            body = encode_value(params)
        path = self.resolve_path(**ids)
        return self._client.create(path, body, self._spec.decoder, timeout=timeout)

    def fetch(
        self,
        resource_id: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        **ids: Optional[str],
    ) -> E:
        path = self.resolve_path(resource_id, **ids)
        return self._client.fetch(path, self._spec.decoder, timeout=timeout)

    def list(
        self,
        search: Optional[SearchParams] = None,
        *,
        timeout: Optional[float] = None,
        **ids: Optional[str],
    ) -> List[E]:
        filters = search.as_map() if search is not None else None
        path = self.resolve_path(**ids)
        return self._client.list(path, filters, self._spec.decoder, timeout=timeout)

    def delete(
        self,
        resource_id: str,
        *,
        timeout: Optional[float] = None,
        **ids: Optional[str],
    ) -> None:
        path = self.resolve_path(resource_id, **ids)
        self._client.delete(path, timeout=timeout)
