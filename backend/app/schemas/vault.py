"""
NoteVault Backend — Vault Request/Response Schemas
====================================================

Request and response shapes for /api/vault/*. Field names are camelCase on
the wire (isSetup, securityQuestion, newPasscode).
"""

from pydantic import Field

from app.schemas.note import ApiModel


# ── Requests ──────────────────────────────────────────────────────────────

class VaultSetupRequest(ApiModel):
    passcode: str = Field(description="New vault passcode (stored as plaintext)")
    security_question: str = Field(description="Recovery question shown on reset")
    security_answer: str = Field(description="Recovery answer, matched case-insensitively")


class VerifyRequest(ApiModel):
    passcode: str


class ResetRequest(ApiModel):
    answer: str = Field(description="Answer to the stored security question")
    new_passcode: str = Field(description="Passcode to set when the answer matches")


# ── Responses ─────────────────────────────────────────────────────────────

class VaultStatusResponse(ApiModel):
    is_setup: bool = Field(description="Whether a vault configuration exists")


class VerifyResponse(ApiModel):
    success: bool


class SecurityQuestionResponse(ApiModel):
    question: str


class ResetResponse(ApiModel):
    """
    Outcome of a passcode reset.

    A wrong answer is reported here with success=False and HTTP 200;
    callers must check the payload, not the status code.
    """
    success: bool
    message: str
