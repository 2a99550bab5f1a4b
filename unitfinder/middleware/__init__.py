"""HTTP middleware: timeout, request ID, correlation ID, security headers.

Applied in main app; order matters (first added = outermost).
"""

from unitfinder.middleware.request_ids import CorrelationIDMiddleware, RequestIDMiddleware
from unitfinder.middleware.security_headers import SecurityHeadersMiddleware
from unitfinder.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
