"""
NoteVault Backend — Vault Configuration Model
===============================================

What:  ORM model for the single-row `vault_config` table.
Why:   The vault is single-user: one passcode, one recovery question.
How:   The row always has id = VAULT_CONFIG_ID; a CHECK constraint rejects
       any other id, so the primary key alone guarantees at most one row.
       Setup is an upsert on that id rather than delete-all-then-insert.

Passcode and security answer are stored as plaintext. They are compared
verbatim by the vault service and must never be logged.
"""

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


# Fixed identity of the one and only vault configuration row
VAULT_CONFIG_ID = 1


class VaultConfig(Base):
    """Passcode and recovery question/answer for the vault."""

    __tablename__ = "vault_config"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
        default=VAULT_CONFIG_ID,
    )

    passcode: Mapped[str] = mapped_column(Text, nullable=False)

    security_question: Mapped[str] = mapped_column(Text, nullable=False)

    security_answer: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        CheckConstraint(f"id = {VAULT_CONFIG_ID}", name="ck_vault_config_singleton"),
    )

    def __repr__(self) -> str:
        # Secrets deliberately left out
        return f"<VaultConfig(id={self.id})>"
