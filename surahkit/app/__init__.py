"""
SurahKit application package.

Fetches surah datasets (one JSON file per language) and answers lookups
over them from memory. Concurrent requests for one language share a
single download.

Structure:
- app.main: create_surahkit() wiring from configuration.
- app.adapters: HTTP client for the dataset CDN.
- app.caching: Single-flight partition cache.
- app.query: Lookups and substring searches.
- app.compat: Old load / get_by_id / search names.
"""
