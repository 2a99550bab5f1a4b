"""Cross-cutting helpers: telemetry and sanitization."""
