from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Login account (credential store only, not an employee)."""

    user_id: int
    username: str
    password_hash: str
