"""Configuration for the ImageKit metadata client."""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from imagekit_metadata.models import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_PREFIX = "https://api.imagekit.io/v1/"

PRIVATE_KEY_VAR = "IMAGEKIT_PRIVATE_KEY"
PUBLIC_KEY_VAR = "IMAGEKIT_PUBLIC_KEY"
ENDPOINT_URL_VAR = "IMAGEKIT_ENDPOINT_URL"
API_PREFIX_VAR = "IMAGEKIT_API_PREFIX"


@dataclass(frozen=True)
class Configuration:
    """Credentials and endpoints shared by every request of a client."""
    private_key: str
    public_key: str
    url_endpoint: str
    api_prefix: str = DEFAULT_API_PREFIX

    def __repr__(self) -> str:
        return (
            f"Configuration(public_key={self.public_key!r}, "
            f"url_endpoint={self.url_endpoint!r}, api_prefix={self.api_prefix!r})"
        )

    def with_api_prefix(self, api_prefix: str) -> "Configuration":
        """Return a copy pointing at another API prefix."""
        return replace(self, api_prefix=api_prefix)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Configuration":
        """Load configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            Configuration built from the environment

        Raises:
            ConfigurationError: If a required variable is missing or empty
        """
        env = os.environ if environ is None else environ

        values = {}
        for var in (PRIVATE_KEY_VAR, PUBLIC_KEY_VAR, ENDPOINT_URL_VAR):
            value = env.get(var, "")
            if not value:
                raise ConfigurationError(f"Missing environment variable {var}")
            values[var] = value

        api_prefix = env.get(API_PREFIX_VAR) or DEFAULT_API_PREFIX
        logger.debug("Loaded configuration from environment, api prefix %s", api_prefix)

        return cls(
            private_key=values[PRIVATE_KEY_VAR],
            public_key=values[PUBLIC_KEY_VAR],
            url_endpoint=values[ENDPOINT_URL_VAR],
            api_prefix=api_prefix,
        )
