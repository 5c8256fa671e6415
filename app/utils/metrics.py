"""
Prometheus-based metrics for production monitoring.
Provides /metrics endpoint for scraping.
"""
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import APIRouter, Response


# Counters
paywall_decisions_total = Counter(
    "paywall_decisions_total",
    "Total paywall access decisions",
    ["endpoint", "access_level"],  # full, preview
)

paywall_previews_total = Counter(
    "paywall_previews_total",
    "Total preview-only decisions by denial reason",
    ["reason_code"],  # unauthenticated, balance_unavailable, cost_unavailable, insufficient_credits
)

# Histograms
paywall_delivered_bytes = Histogram(
    "paywall_delivered_bytes",
    "Size of content delivered after the paywall decision",
    ["access_level"],
    buckets=[256, 1024, 4096, 16384, 65536, 262144],
)


# Metrics endpoint router
router = APIRouter()


@router.get("/metrics")
def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint for scraping."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


def observe_decision(endpoint: str, access_level: str, delivered_bytes: int, reason_code: str | None = None) -> None:
    paywall_decisions_total.labels(endpoint=endpoint, access_level=access_level).inc()
    paywall_delivered_bytes.labels(access_level=access_level).observe(delivered_bytes)
    if reason_code:
        paywall_previews_total.labels(reason_code=reason_code).inc()
