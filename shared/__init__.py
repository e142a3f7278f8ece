"""
Shared utilities for SurahKit.

Common building blocks used by the client, cache and query layers:

- config: Settings via pydantic-settings (SURAHKIT_* environment)
- logging: Structured logging with trace correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses

Do not import from the surahkit package into shared/.
"""
