"""Outbound email adapter."""

from .client import HttpEmailSender, MockEmailSender

__all__ = ["HttpEmailSender", "MockEmailSender"]
