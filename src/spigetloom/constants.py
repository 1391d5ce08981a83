"""Constants used throughout the spigetloom library.

This module defines the Spiget API location, the default client settings and
the placeholder used for the most recent resource version.
"""

# API location
API_SCHEME: str = "https"
API_HOST: str = "api.spiget.org"
API_BASE: str = "/v2/"
SPIGET_API_BASE_URL: str = f"{API_SCHEME}://{API_HOST}{API_BASE}"

# Default settings
DEFAULT_TIMEOUT: float = 30.0  # Only applied to the transport the client creates itself

SPIGETLOOM_VERSION: str = "1.0.0"
DEFAULT_USER_AGENT: str = f"spigetloom/{SPIGETLOOM_VERSION}"

FORM_CONTENT_TYPE: str = "application/x-www-form-urlencoded"

# Version segment the API resolves to the newest upload of a resource
LATEST_VERSION: str = "latest"
