"""Adapters (implementations) for ports."""

from app.adapters.metrics_log import LoggingMetricsRepository
from app.adapters.telegram_notifier import TelegramNotifier

__all__ = ["LoggingMetricsRepository", "TelegramNotifier"]
