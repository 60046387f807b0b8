import time

from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component="common", layer="health")


def _db_check(alias="default"):
    started = time.monotonic()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute("SELECT 1")
    except OperationalError as e:
        logger.warning("Database health check failed", alias=alias, error=str(e))
        return {"status": "fail", "error": str(e)}
    latency = round((time.monotonic() - started) * 1000, 2)
    logger.debug("Database health check succeeded", alias=alias, latency_ms=latency)
    return {"status": "ok", "latency_ms": latency}


def live_health(request):
    """Liveness probe: the process is up and serving requests."""
    return JsonResponse({"status": "alive"})


def ready_health(request):
    """Readiness probe: the cart store can reach its database."""
    checks = {"database": _db_check()}
    failing = [name for name, result in checks.items() if result.get("status") == "fail"]
    overall = "degraded" if failing else "ok"
    logger.info("Readiness probe evaluated", status=overall, failing_components=failing)
    return JsonResponse(
        {"status": overall, "checks": checks},
        status=503 if failing else 200,
    )
