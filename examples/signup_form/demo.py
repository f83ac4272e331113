"""
Sign-up example validating form submissions before account creation.
"""

from __future__ import annotations

from typing import Any, Dict, List

from fieldcheck.utils import get_logger, time_call
from fieldcheck.validation import EMAIL_RX, Validator, matches, permitted_value, unique

from .forms import MAX_NAME_BYTES, PERMITTED_ROLES, SignupForm

logger = get_logger("examples.signup")

SAMPLE_SUBMISSIONS = [
    SignupForm(name="Ada Lovelace", email="ada@example.com", role="author", interests=["math", "poetry"]),
    SignupForm(name="", email="missingat.com", role="admin", interests=["go", "go"]),
]


def validate_signup(form: SignupForm, taken_emails: frozenset[str] = frozenset()) -> Validator:
    v = Validator()
    with time_call("validate_signup", logger, threshold_ms=50):
        v.check(form.name != "", "name", "must be provided")
        v.check(
            len(form.name.encode("utf-8")) <= MAX_NAME_BYTES,
            "name",
            f"must not be more than {MAX_NAME_BYTES} bytes long",
        )

        v.check(form.email != "", "email", "must be provided")
        v.check(matches(form.email, EMAIL_RX), "email", "must be a valid email address")
        if form.email in taken_emails:
            v.add_error("email", "a user with this email address already exists")

        v.check(permitted_value(form.role, *PERMITTED_ROLES), "role", "must be one of the permitted roles")
        v.check(unique(form.interests), "interests", "must not contain duplicate values")
    return v


def run_demo() -> List[Dict[str, Any]]:
    report: List[Dict[str, Any]] = []
    for form in SAMPLE_SUBMISSIONS:
        v = validate_signup(form)
        report.append({"email": form.email, "valid": v.valid(), "errors": dict(v.errors)})
    return report


if __name__ == "__main__":
    for entry in run_demo():
        status = "ok" if entry["valid"] else "; ".join(f"{k}: {m}" for k, m in entry["errors"].items())
        print(f"{entry['email'] or '<blank>'}: {status}")
