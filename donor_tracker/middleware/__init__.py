"""HTTP middleware: request ID and access logging.

Applied in donor_tracker.main.
"""

from donor_tracker.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
