"""HTTP API: query gateway, document fetch gateway, and health routes."""
