"""
Email Templates

Closed registry of email template names, plus a Jinja2 renderer and request
schema that only accept registered names.
"""

from email_templates.templates import (
    TEMPLATE_NAMES,
    EmailTemplateName,
    is_valid_template_name,
    list_template_names,
)
from email_templates.exceptions import UnknownTemplateError
from email_templates.schemas import EmailRequest
from email_templates.loader import render

__all__ = [
    # Registry
    "TEMPLATE_NAMES",
    "EmailTemplateName",
    "is_valid_template_name",
    "list_template_names",
    # Errors
    "UnknownTemplateError",
    # Schemas
    "EmailRequest",
    # Rendering
    "render",
]
