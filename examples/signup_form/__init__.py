from .demo import run_demo, validate_signup  # noqa: F401
from .forms import PERMITTED_ROLES, SignupForm  # noqa: F401

__all__ = [
    "SignupForm",
    "PERMITTED_ROLES",
    "validate_signup",
    "run_demo",
]
