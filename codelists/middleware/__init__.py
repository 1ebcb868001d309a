"""HTTP middleware: request ID.

Applied in the main app. Import and use from codelists.main.
"""

from codelists.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
