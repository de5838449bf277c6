"""Prometheus metrics for the project store"""

import time
from prometheus_client import Counter, Histogram


# Store operation metrics
project_store_operations_total = Counter(
    'project_store_operations_total',
    'Total number of project store operations',
    ['operation', 'backend', 'status']
)

project_store_operation_duration_seconds = Histogram(
    'project_store_operation_duration_seconds',
    'Time spent on project store operations',
    ['operation', 'backend'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


class MetricsCollector:
    """Collector for project store metrics"""

    def record_store_operation(
        self,
        operation: str,
        backend: str,
        status: str,
        duration_seconds: float
    ):
        """Record a project store operation"""
        project_store_operations_total.labels(
            operation=operation,
            backend=backend,
            status=status
        ).inc()

        project_store_operation_duration_seconds.labels(
            operation=operation,
            backend=backend
        ).observe(duration_seconds)


# Global metrics collector instance
metrics_collector = MetricsCollector()


class MetricsTimer:
    """Context manager for timing operations"""

    def __init__(self, callback):
        self.callback = callback
        self.start_time = None

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time
        self.callback(duration, exc_type is None)
        return False
