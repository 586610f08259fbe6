"""Host-to-tenant resolution for inbound requests.

Classifies each request as an internal application route, preview or
unconfigured passthrough, marketing-site traffic, or tenant traffic that
is rewritten to carry the tenant hostname as its first path segment.
"""

import logging
from typing import Iterable, Optional

from ....config.constants import APP_ROUTES, PREVIEW_HOST_MARKER
from ....config.provider import ConfigKey, ConfigurationProvider
from ..entities.routing_decision import RoutingDecision


logger = logging.getLogger(__name__)


def strip_port(host: str) -> str:
    """Remove a trailing :port from a host header value."""
    host = host.strip()
    if host.startswith("["):
        # IPv6 literal, e.g. [::1]:8000
        end = host.find("]")
        return host[:end + 1] if end != -1 else host
    return host.split(":", 1)[0]


class TenantResolver:
    """Resolve request host and path into a RoutingDecision.

    Never raises: every misconfiguration degrades to a passthrough so the
    marketing site keeps serving.
    """

    def __init__(
        self,
        config_provider: ConfigurationProvider,
        app_routes: Iterable[str] = APP_ROUTES,
        preview_host_marker: Optional[str] = PREVIEW_HOST_MARKER,
        treat_www_as_main_domain: bool = True,
    ):
        """Initialize resolver.

        Args:
            config_provider: Provider supplying MARKETING_DOMAIN
            app_routes: Reserved internal path prefixes (literal prefix match)
            preview_host_marker: Substring identifying preview deployments
            treat_www_as_main_domain: Serve ``www.<domain>`` as the marketing site
        """
        self._config_provider = config_provider
        self._app_routes = tuple(app_routes)
        self._preview_host_marker = preview_host_marker
        self._treat_www_as_main_domain = treat_www_as_main_domain

    def resolve(self, host: Optional[str], path: str, query_string: str = "") -> RoutingDecision:
        """Classify a request and compute the path to serve."""
        if any(path.startswith(route) for route in self._app_routes):
            return RoutingDecision.internal_app_route(path, query_string)

        if host and self._preview_host_marker and self._preview_host_marker in host.lower():
            return RoutingDecision.passthrough(path, query_string)

        main_domain = self._config_provider.get(ConfigKey.MARKETING_DOMAIN)
        if not main_domain:
            logger.error("Tenant routing disabled: canonical marketing domain (SITE_URL) is not configured")
            return RoutingDecision.passthrough(path, query_string)

        # Host names are case-insensitive
        hostname = strip_port(host).lower() if host else ""
        if not hostname:
            logger.debug(f"Request without host header for {path}; passing through")
            return RoutingDecision.passthrough(path, query_string)

        if self._is_main_domain(hostname, main_domain.strip().lower()):
            return RoutingDecision.main_domain(path, query_string)

        decision = RoutingDecision.tenant_rewrite(hostname, path, query_string)
        logger.debug(f"Rewriting {hostname}{path} -> {decision.path}")
        return decision

    def _is_main_domain(self, hostname: str, main_domain: str) -> bool:
        if hostname == main_domain:
            return True
        if self._treat_www_as_main_domain:
            return _without_www(hostname) == _without_www(main_domain)
        return False


def _without_www(hostname: str) -> str:
    return hostname[4:] if hostname.startswith("www.") else hostname
