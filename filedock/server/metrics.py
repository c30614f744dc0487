from fastapi import APIRouter, Response
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

router = APIRouter()

REQUESTS_TOTAL = Counter("filedock_requests_total", "Total API requests", ["path", "method", "code"])
COMMANDS_TOTAL = Counter("filedock_commands_total", "Dispatched commands", ["command", "outcome"])
LATENCY = Histogram("filedock_command_latency_ms", "Command latency (ms)",
                    buckets=(1, 5, 10, 25, 50, 100, 250, 500, 1000, 5000, 30000))

@router.get("/healthz")
def healthz():
    return {"ok": True}

@router.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
