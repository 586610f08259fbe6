"""Tenant rewrite middleware for multi-tenant FastAPI applications.

Rewrites requests arriving on school custom domains so one route handler
keyed on the hostname segment serves every tenant.
"""

import logging
import re
from typing import Iterable, Optional, Pattern
from urllib.parse import quote

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ...features.routing.entities import RoutingDecision
from ...features.routing.services import TenantResolver

logger = logging.getLogger(__name__)


# API, framework and static paths never reach the resolver. Prefixes match
# whole path segments only.
DEFAULT_EXEMPT_PREFIXES = ("/api", "/_next", "/fonts", "/examples", "/health", "/docs", "/openapi.json")
DEFAULT_STATIC_FILE_PATTERN = re.compile(r"^/[\w-]+\.\w+")


class TenantRewriteMiddleware(BaseHTTPMiddleware):
    """Apply the tenant routing decision to the request scope."""

    def __init__(
        self,
        app,
        resolver: TenantResolver,
        exempt_prefixes: Optional[Iterable[str]] = None,
        static_file_pattern: Optional[Pattern[str]] = DEFAULT_STATIC_FILE_PATTERN,
    ):
        super().__init__(app)
        self.resolver = resolver
        self.exempt_prefixes = tuple(DEFAULT_EXEMPT_PREFIXES if exempt_prefixes is None else exempt_prefixes)
        self.static_file_pattern = static_file_pattern

    async def dispatch(self, request: Request, call_next) -> Response:
        """Resolve the request and rewrite its path for tenant traffic."""
        path = request.scope["path"]

        if self._is_exempt(path):
            return await call_next(request)

        query_string = request.scope.get("query_string", b"").decode("latin-1")

        try:
            decision = self.resolver.resolve(request.headers.get("host"), path, query_string)
        except Exception as e:
            logger.error(f"Tenant resolution failed for {path}, passing through: {e}")
            decision = RoutingDecision.passthrough(path, query_string)

        request.state.routing_decision = decision

        if decision.is_rewrite:
            # query_string stays untouched in the scope
            raw_path = request.scope.get("raw_path") or quote(path).encode("ascii")
            request.scope["path"] = decision.path
            request.scope["raw_path"] = b"/" + quote(decision.tenant_host).encode("ascii") + raw_path

        return await call_next(request)

    def _is_exempt(self, path: str) -> bool:
        if any(path == prefix or path.startswith(prefix.rstrip("/") + "/") for prefix in self.exempt_prefixes):
            return True
        return bool(self.static_file_pattern and self.static_file_pattern.match(path))
