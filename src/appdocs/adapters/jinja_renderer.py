"""
Jinja2 markup renderer.

Renders an HTML template file with a view model. The template URI is a
filesystem path or a file:// URI; the template directory becomes the loader
root so templates can extend or include their siblings.
"""

from decimal import Decimal
from pathlib import Path
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname

from jinja2 import Environment, FileSystemLoader, select_autoescape

from appdocs.documents.exceptions import ConfigurationError


def format_money(value: Any) -> str:
    """Two-decimal amount with thousands separators, e.g. 1,234.50."""
    return f"{Decimal(value):,.2f}"


def template_path_from_uri(template_uri: str) -> Path:
    """
    Filesystem path of a template URI.

    Raises:
        ConfigurationError: For URI schemes other than file://
    """
    parsed = urlparse(template_uri)
    if parsed.scheme == "file":
        return Path(url2pathname(parsed.path))
    if parsed.scheme and len(parsed.scheme) > 1:
        raise ConfigurationError(f"Unsupported template URI scheme: {template_uri}")
    # No scheme, or a Windows drive letter
    return Path(template_uri)


class JinjaMarkupRenderer:
    """Markup renderer using Jinja2 file templates."""

    def __init__(self, autoescape: bool = True):
        self.autoescape = autoescape

    def _environment(self, template_dir: Path) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"]) if self.autoescape else False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.filters["money"] = format_money
        return env

    def render(self, template_uri: str, view_model: Any) -> str:
        """
        Render a template with a view model.

        The view model is available as `vm`, and each of its fields as a
        top-level variable.

        Raises:
            ConfigurationError: If the template file does not exist
        """
        path = template_path_from_uri(template_uri)
        if not path.is_file():
            raise ConfigurationError(f"Template not found: {template_uri}")

        template = self._environment(path.parent).get_template(path.name)
        return template.render(vm=view_model, **dict(view_model))
