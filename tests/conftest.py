"""Test configuration and fixtures."""

import os

import logfire

# Settings are read from the environment; pin the values tests rely on
os.environ["ENVIRONMENT"] = "test"
os.environ["AUTH__ADMIN_SECRET"] = "test-admin-secret"
os.environ["ADMIN_EMAIL"] = (
    '{"default": "admin@example.com", "blog": "blog-admin@example.com"}'
)
os.environ["TURNSTILE__SECRET"] = "test-turnstile-secret"

logfire.configure(send_to_logfire=False, console=False)
