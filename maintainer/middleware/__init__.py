"""HTTP middleware. Applied in maintainer.main."""

from maintainer.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
