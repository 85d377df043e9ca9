"""Route table for the site and its registration onto a FastAPI router.

The table is a tuple of frozen ``Route`` values built once at import. Each
route points at a handler action by ``(resource, action)``; the endpoint
callables are looked up only when the table is registered.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import ModuleType
from typing import Any

from portfolio.routes import messages, pages, welcome

ALLOWED_METHODS = frozenset({'GET', 'POST'})


class RouteConfigurationError(ValueError):
    """Raised when the route table cannot be built or registered."""


@dataclass(frozen=True, slots=True)
class HandlerRef:
    resource: str
    action: str

    def __str__(self) -> str:
        return f'{self.resource}.{self.action}'


@dataclass(frozen=True, slots=True)
class Route:
    method: str
    path: str
    handler: HandlerRef
    name: str | None = None


class RouteTable:
    """Read-only lookup over an ordered set of routes."""

    __slots__ = ('_routes', '_by_key', '_by_name')

    def __init__(self, routes: Iterable[Route]) -> None:
        ordered = tuple(routes)
        by_key: dict[tuple[str, str], Route] = {}
        by_name: dict[str, Route] = {}

        for route in ordered:
            if route.method not in ALLOWED_METHODS:
                raise RouteConfigurationError(f'Unsupported method {route.method!r} for {route.path}')

            key = (route.method, route.path)
            if key in by_key:
                raise RouteConfigurationError(f'Duplicate route {route.method} {route.path}')
            by_key[key] = route

            if route.name is not None:
                if route.name in by_name:
                    raise RouteConfigurationError(f'Duplicate route name {route.name!r}')
                by_name[route.name] = route

        self._routes = ordered
        self._by_key = by_key
        self._by_name = by_name

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def resolve(self, method: str, path: str) -> Route | None:
        return self._by_key.get((method.upper(), path))

    def url_for(self, name: str) -> str:
        return self._by_name[name].path


ROUTES = (
    Route('GET', '/contact-me', HandlerRef('messages', 'new'), 'new_message'),
    Route('POST', '/contact-me', HandlerRef('messages', 'create'), 'create_message'),
    Route('GET', '/resume-download', HandlerRef('welcome', 'download_resume'), 'download_resume'),
    Route('GET', '/about-me', HandlerRef('pages', 'about_me')),
    Route('GET', '/', HandlerRef('pages', 'home'), 'root'),
)

ROUTE_TABLE = RouteTable(ROUTES)

HANDLERS: Mapping[str, ModuleType] = {
    'messages': messages,
    'welcome': welcome,
    'pages': pages,
}


def resolve_handler(ref: HandlerRef, handlers: Mapping[str, Any] = HANDLERS):
    module = handlers.get(ref.resource)
    if module is None:
        raise RouteConfigurationError(f'Unknown handler resource {ref.resource!r}')

    endpoint = getattr(module, ref.action, None)
    if not callable(endpoint):
        raise RouteConfigurationError(f'Unknown handler action {ref}')
    return endpoint


def register_routes(router, table: RouteTable = ROUTE_TABLE, handlers: Mapping[str, Any] = HANDLERS) -> None:
    """Add every route to ``router`` (a FastAPI app or APIRouter) in table order."""
    # Resolve everything first so a bad reference leaves the router untouched.
    endpoints = [(route, resolve_handler(route.handler, handlers)) for route in table]

    for route, endpoint in endpoints:
        router.add_api_route(
            route.path,
            endpoint,
            methods=[route.method],
            name=route.name,
        )
