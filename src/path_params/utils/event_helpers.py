"""Path-info sources for CGI/WSGI environments and API Gateway events.

PathInfoParams never reads process or request state itself. A source is
read once, when the store is built, and hands over the raw (still
percent-encoded) path information.

For API Gateway, a ``{proxy+}`` resource exposes the greedy path tail as
``pathParameters["proxy"]``; API Gateway sends null for pathParameters when
no path parameters are defined.
"""

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class PathInfoSource(Protocol):
    """Anything that can supply the raw path information of a request."""

    def get_path_info(self) -> str: ...


class EnvironPathInfoSource:
    """Reads ``PATH_INFO`` from a CGI or WSGI environ mapping."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get_path_info(self) -> str:
        return self._environ.get("PATH_INFO") or ""


class ApiGatewayPathInfoSource:
    """Reads the path tail from an API Gateway Proxy Integration event.

    Args:
        event: API Gateway Proxy Integration event dict.
        base_path: Route prefix removed from ``rawPath``/``path`` when the
            event carries no ``proxy`` path parameter.
    """

    def __init__(self, event: dict, base_path: str = "") -> None:
        self._event = event
        self._base_path = base_path

    def get_path_info(self) -> str:
        return get_path_info(self._event, self._base_path)


def get_path_info(event: dict, base_path: str = "") -> str:
    """Get the raw path information of an API Gateway event, never None.

    Args:
        event: API Gateway Proxy Integration event dict.
        base_path: Prefix stripped from the request path in the fallback case.

    Returns:
        The ``proxy`` path parameter if present, else the request path with
        base_path removed, else an empty string.
    """
    path_params = event.get("pathParameters") or {}
    proxy = path_params.get("proxy")
    if proxy is not None:
        return proxy

    path = event.get("rawPath") or event.get("path") or ""
    if base_path and path.startswith(base_path):
        path = path[len(base_path) :]
    return path
