from .instrumentation import DecisionLog, MetricsCollector, RunMetrics

__all__ = ["DecisionLog", "MetricsCollector", "RunMetrics"]
