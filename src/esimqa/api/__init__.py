"""Partner API access for the API scenarios."""

from .client import PartnerApiClient

__all__ = [
    "PartnerApiClient",
]
