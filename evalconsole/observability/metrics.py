"""Prometheus metrics for console sessions."""

from prometheus_client import Counter, Gauge, Histogram

SESSIONS_CREATED = Counter(
    "evalconsole_sessions_created_total",
    "Total number of console sessions created",
    labelnames=["source"],
)

LIVE_SESSIONS = Gauge(
    "evalconsole_live_sessions",
    "Number of sessions held in the registry",
)

EVALUATIONS = Counter(
    "evalconsole_evaluations_total",
    "Total number of evaluations",
    labelnames=["status"],
)

EVALUATION_LATENCY = Histogram(
    "evalconsole_evaluation_latency_seconds",
    "Evaluation latency in seconds",
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0),
)

BINDING_SWITCHES = Counter(
    "evalconsole_binding_switches_total",
    "Total number of binding switches",
)

AUDIT_RECORDS = Counter(
    "evalconsole_audit_records_total",
    "Total number of evaluation records appended to the audit store",
)
