from cpusim.metrics.collector import MetricsCollector, MetricsReport, ProcessRow

__all__ = ["MetricsCollector", "MetricsReport", "ProcessRow"]
