"""
Template Layer Exceptions

Raised by consumers of the template name registry when a caller asks for a
template that is not registered.
"""

from .templates import TEMPLATE_NAMES


class UnknownTemplateError(ValueError):
    """Raised when a template name is not one of the recognized names."""

    def __init__(self, template_name: object):
        self.template_name = template_name
        super().__init__(
            f"Unknown email template {template_name!r}. "
            f"Expected one of: {', '.join(TEMPLATE_NAMES)}"
        )
