"""Observability: structured logging and Prometheus metrics.

Logging goes through structlog; counters are exported with prometheus_client.
"""
