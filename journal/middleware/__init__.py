# Middleware package init
"""
Journal Backend — Middleware Package
======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID: correlation id, echoed in the X-Request-ID header
    - Logging: access log line with status and duration
"""
