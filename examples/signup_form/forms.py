"""
Sign-up form shape and the rules applied to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

PERMITTED_ROLES = ("reader", "author", "editor")
MAX_NAME_BYTES = 500


@dataclass
class SignupForm:
    name: str = ""
    email: str = ""
    role: str = "reader"
    interests: List[str] = field(default_factory=list)
