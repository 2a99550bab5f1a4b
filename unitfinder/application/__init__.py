"""Application layer: gateway use cases over the search engine adapter."""
