# Services package init
"""
NoteVault Backend — Services Layer
====================================

What:  Business logic between routes (HTTP) and the database (persistence).

Service Inventory:
    - NoteService:         public notes (list / create / delete)
    - VaultNoteService:    vault notes, same operations plus createdAt
    - VaultConfigService:  vault setup, status, verify, recovery

Services receive the request's AsyncSession on every call and hold no
state of their own, so they can be unit-tested with a mock session.
"""
