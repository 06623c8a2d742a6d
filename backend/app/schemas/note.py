"""
NoteVault Backend — Pydantic Request/Response Schemas (notes)
===============================================================

What:  Pydantic models defining the API contract between frontend and backend.
Why:   Explicit request shapes at the API boundary, automatic serialization,
       and OpenAPI doc generation.
How:   FastAPI validates request bodies against the *Create models and
       serializes responses through the *Response models.

Wire format:
    Field names are camelCase on the wire (createdAt); snake_case names are
    also accepted on input. FastAPI serializes response models by alias.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for every API schema: camelCase aliases, ORM attribute loading."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(ApiModel):
    """
    Body of POST /api/notes and POST /api/vault/notes.

    content must be present but may be empty; rejecting blank notes is left
    to the client.
    """
    title: Optional[str] = Field(default=None, description="Optional note title")
    content: str = Field(description="Note body")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(ApiModel):
    """A public note as returned by /api/notes."""
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: Optional[str] = Field(default=None, description="Note title, if any")
    content: str = Field(description="Note body")


class PrivateNoteResponse(NoteResponse):
    """A vault note as returned by /api/vault/notes."""
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")


class MessageResponse(ApiModel):
    """Plain acknowledgement, e.g. after a delete or vault setup."""
    message: str = Field(description="Human-readable result")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Vault not setup",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(ApiModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
