"""Documentation retrieval: catalog, fetcher, normalizer, cache, search, patterns."""
