from prometheus_client import Counter, Histogram, generate_latest
from prometheus_client.core import CollectorRegistry

# Own registry so applications embedding the client decide whether to expose it
CLIENT_REGISTRY = CollectorRegistry()

GATEWAYAPI_REQUESTS_TOTAL = Counter(
    'gatewayapi_requests_total',
    'Total number of requests sent to GatewayAPI.',
    ['endpoint', 'outcome'],
    registry=CLIENT_REGISTRY
)
GATEWAYAPI_REQUEST_LATENCY_SECONDS = Histogram(
    'gatewayapi_request_latency_seconds',
    'Latency of GatewayAPI requests in seconds.',
    ['endpoint'],
    registry=CLIENT_REGISTRY
)


def metrics_content() -> bytes:
    """Returns the client metrics in the Prometheus text exposition format."""
    return generate_latest(CLIENT_REGISTRY)
