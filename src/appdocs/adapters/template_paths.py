"""Template path provider backed by a mapping."""

from typing import Dict, Final, Mapping, Optional

from appdocs.documents.exceptions import ConfigurationError

DEFAULT_TEMPLATE_PATHS: Final[Dict[str, str]] = {
    "PendingApplication": "/pending_application.html",
    "ActivatedApplication": "/activated_application.html",
    "InReviewApplication": "/in_review_application.html",
}


class MappingTemplatePathProvider:
    """Resolves template keys through a fixed mapping of key → path fragment."""

    def __init__(self, paths: Optional[Mapping[str, str]] = None):
        self._paths = dict(DEFAULT_TEMPLATE_PATHS if paths is None else paths)

    def get(self, template_key: str) -> str:
        """
        Raises:
            ConfigurationError: If the key is not configured
        """
        try:
            return self._paths[template_key]
        except KeyError:
            raise ConfigurationError(f"No template configured for key '{template_key}'")
