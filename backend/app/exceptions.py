"""
NoteVault Backend — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages, without leaking internals.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and route dependencies; caught by global handlers.

Exception Hierarchy:
    NoteVaultError (base)          → 500 Internal Server Error
    ├── NotFoundError              → 404 Not Found
    │   └── NotConfiguredError     → 404 Not Found (vault has no config yet)
    ├── VaultLockedError           → 401 Unauthorized (passcode gate enabled)
    └── StoreUnavailableError      → 500 Internal Server Error

A wrong passcode or a wrong security answer is NOT an exception: the vault
service reports it as `success: false` in a normal 200 response body.
"""

from typing import Any, Dict, Optional


class NoteVaultError(Exception):
    """
    Base exception for all NoteVault application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(NoteVaultError):
    """
    Raised when a requested resource does not exist.

    HTTP: 404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class NotConfiguredError(NotFoundError):
    """
    Raised when an operation needs the vault configuration but none exists.

    When:  GET /api/vault/security-question before POST /api/vault/setup.
    HTTP:  404 Not Found
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            resource="vault configuration",
            message="Vault not setup",
            context=context,
        )


class VaultLockedError(NoteVaultError):
    """
    Raised by the optional vault-notes gate when the request does not carry
    the current passcode in the X-Vault-Passcode header.

    HTTP: 401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Vault is locked. Provide the passcode in the X-Vault-Passcode header.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreUnavailableError(NoteVaultError):
    """
    Raised when the database cannot be reached or a statement fails.

    HTTP: 500 Internal Server Error

    The message returned to the client is always generic. Statement text and
    driver errors go to the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
