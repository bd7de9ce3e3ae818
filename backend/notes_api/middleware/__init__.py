# Middleware package init
"""
Notes API — Middleware Package
===============================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → [Unexpected Error] → Route Handler

    Request ID runs first so the access log line and any error log written
    while handling the request share the same correlation ID. Unexpected
    Error runs last, so an unhandled exception becomes a 500 envelope that
    still carries CORS headers and X-Request-ID.
"""
