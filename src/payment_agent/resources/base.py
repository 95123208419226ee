"""Common base for resource sub-agents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, TypeVar
from urllib.parse import quote

from ..core.decoders import as_object
from ..core.errors import MalformedTargetError
from ..core.transport import Decoder

if TYPE_CHECKING:
    from ..agent import Agent

T = TypeVar("T")


class ResourceAgent:
    """A resource-scoped view over an :class:`Agent`.

    Holds nothing but the owning agent; all requests go through the
    agent's shared transport.
    """

    __slots__ = ("_agent",)

    def __init__(self, agent: "Agent") -> None:
        self._agent = agent

    @property
    def agent(self) -> "Agent":
        return self._agent

    def _call(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        body: object = None,
        decoder: Decoder[T] = as_object,
    ) -> T | None:
        url = self._agent.url_for(path, params)
        descriptor = self._agent.new_request(method, url, body)
        return self._agent.send(descriptor, decoder)


def path_segment(value: str) -> str:
    if not value:
        raise MalformedTargetError("path segment must not be empty")
    return quote(value, safe="")


__all__ = [
    "ResourceAgent",
    "path_segment",
]
