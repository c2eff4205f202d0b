"""Ports (interfaces) for dependency inversion."""

from app.ports.metrics_repository import MetricsRepository
from app.ports.notifier import Notifier

__all__ = ["MetricsRepository", "Notifier"]
