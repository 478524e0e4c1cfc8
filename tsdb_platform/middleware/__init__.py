"""HTTP middleware: request timeout and request ID.

Applied in create_app(); last added = outermost.
"""

from tsdb_platform.middleware.request_id import RequestIDMiddleware
from tsdb_platform.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
