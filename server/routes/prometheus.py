from prometheus_client import Counter, Gauge, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import APIRouter, Request, Response
from server.database import SessionLocal
from server.models import TimerRecord
import time

router = APIRouter()

REQUEST_COUNT = Counter(
    "timer_api_requests_total",
    "Total Timer API Requests",
    ["method", "endpoint", "http_status"]
)

REQUEST_LATENCY = Histogram(
    "timer_api_request_duration_seconds",
    "Timer API request latency",
    ["endpoint"]
)

EXCEPTION_COUNT = Counter(
    "timer_api_exceptions_total",
    "Total exceptions",
    ["endpoint"]
)

ENABLED_TIMERS = Gauge(
    "timers_enabled",
    "Number of enabled timers"
)

def _count_enabled() -> int:
    db = SessionLocal()
    try:
        return db.query(TimerRecord).filter(TimerRecord.enabled == True).count()
    finally:
        db.close()

@router.get("/")
def metrics():
    ENABLED_TIMERS.set(_count_enabled())
    data = generate_latest()
    return Response(data, media_type=CONTENT_TYPE_LATEST)

async def metrics_middleware(request: Request, call_next):
    start_time = time.time()
    # label by route template so ids do not explode cardinality
    try:
        response = await call_next(request)
    except Exception:
        EXCEPTION_COUNT.labels(endpoint=request.url.path).inc()
        raise

    route = request.scope.get("route")
    endpoint = getattr(route, "path", request.url.path)
    process_time = time.time() - start_time

    REQUEST_LATENCY.labels(endpoint=endpoint).observe(process_time)
    REQUEST_COUNT.labels(
        method=request.method,
        endpoint=endpoint,
        http_status=response.status_code
    ).inc()

    return response
