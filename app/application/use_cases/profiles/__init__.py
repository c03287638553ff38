"""Use cases for maintaining account-to-profile links."""

from .link_profiles import link_account_profiles, link_profiles_by_email

__all__ = ["link_account_profiles", "link_profiles_by_email"]
