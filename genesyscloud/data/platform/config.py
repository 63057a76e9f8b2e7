"""Genesys Cloud region configuration.

This module maps region names to their platform domains and builds the API
and login base URLs used by the platform API client.
"""

from __future__ import annotations

REGION_DOMAINS: dict[str, str] = {
    "us-east-1": "mypurecloud.com",
    "us-east-2": "use2.us-gov-pure.cloud",
    "us-west-2": "usw2.pure.cloud",
    "ca-central-1": "cac1.pure.cloud",
    "eu-west-1": "mypurecloud.ie",
    "eu-west-2": "euw2.pure.cloud",
    "eu-central-1": "mypurecloud.de",
    "eu-central-2": "euc2.pure.cloud",
    "ap-south-1": "aps1.pure.cloud",
    "ap-northeast-1": "mypurecloud.jp",
    "ap-northeast-2": "apne2.pure.cloud",
    "ap-northeast-3": "apne3.pure.cloud",
    "ap-southeast-2": "mypurecloud.com.au",
    "sa-east-1": "sae1.pure.cloud",
    "me-central-1": "mec1.pure.cloud",
}

API_PATH_PREFIX = "/api/v2"


def get_api_base_url(region: str) -> str:
    """Get the platform API base URL of a region.

    Args:
        region: Genesys Cloud region name

    Returns:
        Base URL string

    Raises:
        KeyError: If the region is unknown

    Examples:
        >>> get_api_base_url("us-east-1")
        'https://api.mypurecloud.com'
        >>> get_api_base_url("eu-central-1")
        'https://api.mypurecloud.de'
    """
    return f"https://api.{REGION_DOMAINS[region]}"


def get_login_url(region: str) -> str:
    """Get the OAuth token endpoint of a region.

    Examples:
        >>> get_login_url("ap-southeast-2")
        'https://login.mypurecloud.com.au/oauth/token'
    """
    return f"https://login.{REGION_DOMAINS[region]}/oauth/token"
