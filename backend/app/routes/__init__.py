# Routes package init
"""
NoteVault Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.
How:   Each route module handles one resource.

Route Inventory:
    - notes.py:   GET/POST /api/notes, DELETE /api/notes/{id}
    - vault.py:   GET  /api/vault/status
                  POST /api/vault/setup, /api/vault/verify, /api/vault/reset
                  GET  /api/vault/security-question
                  GET/POST /api/vault/notes, DELETE /api/vault/notes/{id}
    - health.py:  GET  /health

Routes stay thin: decode the request, call one service method, shape the
response. Business rules live in app.services.
"""
