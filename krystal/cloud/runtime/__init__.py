"""Runtime orchestration components."""

from .rest import HTTPClient, ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
