"""Infrastructure: adapters for external systems (the search engine)."""
