"""Broadcast report assembly."""

from telegram_broadcast.services.report.report_builder import ReportBuilder, format_duration

__all__ = ["ReportBuilder", "format_duration"]
