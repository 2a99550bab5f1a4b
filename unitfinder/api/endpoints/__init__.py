"""Route modules: search (query gateway), files (document fetch gateway), health."""
