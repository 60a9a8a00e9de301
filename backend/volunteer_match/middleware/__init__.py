"""
Middleware Package

Contains FastAPI middleware for:
- Permissive CORS headers and OPTIONS short-circuit
- Prometheus metrics collection
"""

from volunteer_match.middleware.cors import PermissiveCORSMiddleware
from volunteer_match.middleware.metrics import (
    PrometheusMiddleware,
    setup_metrics,
    REQUEST_LATENCY,
    REQUEST_COUNT,
    ACTIVE_REQUESTS,
    USERS_REGISTERED,
    LOGINS,
    JOBS_CREATED,
    APPLICATIONS_SUBMITTED,
    JOBS_COMPLETED,
)

__all__ = [
    "PermissiveCORSMiddleware",
    "PrometheusMiddleware",
    "setup_metrics",
    "REQUEST_LATENCY",
    "REQUEST_COUNT",
    "ACTIVE_REQUESTS",
    "USERS_REGISTERED",
    "LOGINS",
    "JOBS_CREATED",
    "APPLICATIONS_SUBMITTED",
    "JOBS_COMPLETED",
]
