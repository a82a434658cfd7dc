"""Cloudflare Turnstile bot-check adapter."""

from .client import MockBotVerifier, TurnstileVerifier

__all__ = ["MockBotVerifier", "TurnstileVerifier"]
