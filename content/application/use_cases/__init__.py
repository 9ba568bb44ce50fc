"""Application use cases."""

from content.application.use_cases.route_defaults import ContentRouteDefaultsProvider

__all__ = ["ContentRouteDefaultsProvider"]
