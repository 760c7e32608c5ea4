# Routes package init
"""
Journal Backend — API Routes Package
======================================

Route Inventory:
    - categories.py: GET/POST /api/categories
    - entries.py:    GET/POST /api/entries, GET/PATCH/DELETE /api/entries/{id}
    - comments.py:   GET/POST /api/entries/{id}/comments, DELETE /api/comments/{id}
    - media.py:      GET/POST /api/entries/{id}/media, DELETE /api/media/{id}
    - uploads.py:    GET /uploads/{name}
    - health.py:     GET /health

Routes are thin: parse the request, call one repository method, return
its response model. Errors are raised and rendered by the global handlers.
"""
