"""
Health endpoints shared by both services.

Follows the "Health Check Response Format for HTTP APIs" draft for the
readiness payload and the Kubernetes probe split (live / ready / startup).
"""

import logging
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, Optional

import psutil
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class HealthStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


class ServiceHealth:
    """
    Builds the health router for one service.

    The database engine is passed in rather than rebuilt from environment
    variables so the checks hit the same store the service uses.
    """

    def __init__(
        self,
        service_name: str,
        version: str = "1.0.0",
        engine: Optional[Engine] = None,
        required_settings: Optional[Dict[str, Any]] = None,
        release_id: str = "unknown",
    ):
        self.service_name = service_name
        self.version = version
        self.engine = engine
        self.required_settings = required_settings or {}
        self.release_id = release_id
        self.start_time = time.time()
        self.checks_performed = 0
        self.last_check_time: Optional[float] = None

    def create_health_router(self) -> APIRouter:
        router = APIRouter(tags=["health"])

        @router.get("/health", status_code=status.HTTP_200_OK)
        async def health_check() -> Dict[str, Any]:
            """Liveness probe used by load balancers"""
            return {
                "status": HealthStatus.PASS,
                "service": self.service_name,
                "version": self.version,
                "releaseId": self.release_id,
                "timestamp": _now()
            }

        @router.get("/health/live", status_code=status.HTTP_200_OK)
        async def liveness() -> Dict[str, Any]:
            return {"status": "alive"}

        @router.get("/health/ready")
        async def readiness() -> JSONResponse:
            """Readiness probe: checks the database and host resources"""
            checks = self.perform_readiness_checks()
            overall_status = self.calculate_overall_status(checks.values())
            status_code = (
                status.HTTP_503_SERVICE_UNAVAILABLE
                if overall_status == HealthStatus.FAIL
                else status.HTTP_200_OK
            )
            return JSONResponse(status_code=status_code, content={
                "status": overall_status,
                "version": self.version,
                "releaseId": self.release_id,
                "checks": checks,
                "serviceId": self.service_name,
                "description": f"{self.service_name} microservice",
                "timestamp": _now()
            })

        @router.get("/health/startup")
        async def startup() -> JSONResponse:
            checks = self.perform_startup_checks()
            if self.calculate_overall_status(checks.values()) == HealthStatus.FAIL:
                return JSONResponse(
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                    content={"status": "starting", "checks": checks}
                )
            return JSONResponse(content={"status": "started", "checks": checks})

        @router.get("/metrics")
        async def metrics() -> Dict[str, Any]:
            process = psutil.Process()
            memory = process.memory_info()
            return {
                "service": self.service_name,
                "version": self.version,
                "uptime_seconds": time.time() - self.start_time,
                "checks_performed": self.checks_performed,
                "timestamp": _now(),
                "system": {
                    "memory_rss_bytes": memory.rss,
                    "memory_vms_bytes": memory.vms,
                    "cpu_percent": process.cpu_percent(),
                    "num_threads": process.num_threads()
                }
            }

        return router

    def perform_readiness_checks(self) -> Dict[str, Dict[str, Any]]:
        self.checks_performed += 1
        self.last_check_time = time.time()
        return {
            "database:connectivity": self.check_database(),
            "storage:disk_space": self.check_disk_space(),
            "system:memory": self.check_memory(),
        }

    def perform_startup_checks(self) -> Dict[str, Dict[str, Any]]:
        return {
            "database:migrations": self.check_migrations(),
            "config:environment": self.check_configuration(),
        }

    def check_database(self) -> Dict[str, Any]:
        if self.engine is None:
            return {"status": HealthStatus.WARN, "componentType": "datastore",
                    "output": "No database configured", "time": _now()}
        try:
            start_time = time.time()
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            response_time = (time.time() - start_time) * 1000
            return {
                "status": HealthStatus.PASS,
                "componentType": "datastore",
                "observedValue": f"{response_time:.2f}",
                "observedUnit": "ms",
                "time": _now()
            }
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {"status": HealthStatus.FAIL, "componentType": "datastore",
                    "output": str(e), "time": _now()}

    def check_migrations(self) -> Dict[str, Any]:
        """Warns when the alembic_version table is missing (tables created without migrations)"""
        if self.engine is None:
            return {"status": HealthStatus.WARN, "componentType": "datastore",
                    "output": "No database configured", "time": _now()}
        try:
            if inspect(self.engine).has_table("alembic_version"):
                return {"status": HealthStatus.PASS, "componentType": "datastore", "time": _now()}
            return {"status": HealthStatus.WARN, "componentType": "datastore",
                    "output": "Migrations table not found", "time": _now()}
        except Exception as e:
            return {"status": HealthStatus.FAIL, "componentType": "datastore",
                    "output": str(e), "time": _now()}

    def check_configuration(self) -> Dict[str, Any]:
        missing = [name for name, value in self.required_settings.items() if value in (None, "")]
        if missing:
            return {
                "status": HealthStatus.FAIL,
                "componentType": "configuration",
                "output": f"Missing settings: {', '.join(missing)}",
                "time": _now()
            }
        return {"status": HealthStatus.PASS, "componentType": "configuration", "time": _now()}

    def check_disk_space(self) -> Dict[str, Any]:
        try:
            free_gb = psutil.disk_usage('/').free / (1024 ** 3)
        except Exception as e:
            return {"status": HealthStatus.WARN, "componentType": "system",
                    "output": str(e), "time": _now()}
        if free_gb < 1:
            status_val = HealthStatus.FAIL
        elif free_gb < 5:
            status_val = HealthStatus.WARN
        else:
            status_val = HealthStatus.PASS
        return {
            "status": status_val,
            "componentType": "system",
            "observedValue": f"{free_gb:.2f}",
            "observedUnit": "GB",
            "time": _now()
        }

    def check_memory(self) -> Dict[str, Any]:
        try:
            available_mb = psutil.virtual_memory().available / (1024 ** 2)
        except Exception as e:
            return {"status": HealthStatus.WARN, "componentType": "system",
                    "output": str(e), "time": _now()}
        if available_mb < 100:
            status_val = HealthStatus.FAIL
        elif available_mb < 500:
            status_val = HealthStatus.WARN
        else:
            status_val = HealthStatus.PASS
        return {
            "status": status_val,
            "componentType": "system",
            "observedValue": f"{available_mb:.2f}",
            "observedUnit": "MB",
            "time": _now()
        }

    @staticmethod
    def calculate_overall_status(checks: Iterable[Dict[str, Any]]) -> HealthStatus:
        statuses = [check.get("status", HealthStatus.PASS) for check in checks]
        if HealthStatus.FAIL in statuses:
            return HealthStatus.FAIL
        if HealthStatus.WARN in statuses:
            return HealthStatus.WARN
        return HealthStatus.PASS
