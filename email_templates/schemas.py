"""
Schemas - Request Models Restricted to Registered Templates

Pydantic models that accept only recognized template names. Validation of an
unknown name fails at the model boundary with a ValidationError.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .templates import EmailTemplateName


class EmailRequest(BaseModel):
    """A request to render one email template for one recipient."""
    template: EmailTemplateName = Field(
        ...,
        description="Registered template name. Serialized as the bare identifier string."
    )
    recipient: str = Field(
        ...,
        description="Address the rendered email is intended for."
    )
    context: Dict[str, Any] = Field(
        default_factory=dict,
        description="Variables passed to the template when rendering."
    )
