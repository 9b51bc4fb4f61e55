"""
Template name registry.

Pure constants - no I/O or file system knowledge. Each member's value is its
own name, so the string stored on the wire is the identifier itself.
"""

from enum import Enum, unique
from typing import Any, Tuple


@unique
class EmailTemplateName(str, Enum):
    """Recognized email template names. Use these instead of raw strings."""

    signUpV1 = "signUpV1"
    signInV1 = "signInV1"
    orgInvitationV1 = "orgInvitationV1"

    def __str__(self) -> str:
        return self.value


TEMPLATE_NAMES: Tuple[str, ...] = tuple(member.value for member in EmailTemplateName)

_VALID_NAMES = frozenset(TEMPLATE_NAMES)


def list_template_names() -> Tuple[EmailTemplateName, ...]:
    """Return every recognized template name in declaration order."""
    return tuple(EmailTemplateName)


def is_valid_template_name(candidate: Any) -> bool:
    """
    Check whether a value is exactly one of the recognized template names.

    Matching is case-sensitive with no normalization. Non-string input
    returns False rather than raising.
    """
    if not isinstance(candidate, str):
        return False
    # Enum members hash by name; compare on the raw string value instead
    return str.__str__(candidate) in _VALID_NAMES
