"""
Jinja2 loader for email templates.

Loads <name>.jinja2 files from the configured templates directory and renders
them with provided context variables. Only registered template names are
accepted.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .config import settings
from .exceptions import UnknownTemplateError
from .templates import EmailTemplateName, is_valid_template_name, list_template_names

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".jinja2"


def template_path(template_name: Union[EmailTemplateName, str], templates_dir: Path = None) -> Path:
    """Path of the file backing a template name."""
    directory = templates_dir or settings.TEMPLATES_DIR
    return Path(directory) / f"{EmailTemplateName(template_name).value}{TEMPLATE_SUFFIX}"


def validate_templates(templates_dir: Path = None):
    """Validate every registered name has a corresponding file. Fails fast at import."""
    for name in list_template_names():
        path = template_path(name, templates_dir)
        if not path.exists():
            raise FileNotFoundError(f"Template missing: {path}")


validate_templates()


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    """Create and cache the Jinja2 environment."""
    return Environment(
        loader=FileSystemLoader(settings.TEMPLATES_DIR),
        autoescape=settings.AUTOESCAPE,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render(template_name: Union[EmailTemplateName, str], **context) -> str:
    """
    Load and render an email template.

    Args:
        template_name: A registered template name (member or its string value)
        **context: Variables to pass to the template

    Returns:
        Rendered template string

    Raises:
        UnknownTemplateError: template_name is not a registered name
        jinja2.UndefinedError: the template uses a variable missing from context
    """
    if not is_valid_template_name(template_name):
        logger.warning(f"Rejected unknown email template: {template_name!r}")
        raise UnknownTemplateError(template_name)

    name = EmailTemplateName(template_name)
    env = _get_environment()
    template = env.get_template(f"{name.value}{TEMPLATE_SUFFIX}")
    logger.debug(f"Rendering email template {name.value}")
    return template.render(**context)
