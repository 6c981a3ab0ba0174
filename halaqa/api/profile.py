"""
Profile endpoints.
"""

from .client import ApiClient
from .payload import unwrap


class ProfileApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def get_profile(self) -> dict:
        """Complete user profile with role-specific data."""
        profile = unwrap(self.client.get("/api/profile"), "profile")
        return profile if isinstance(profile, dict) else {}

    def update_profile(self, profile_data: dict):
        return self.client.put("/api/profile", json=profile_data)

    def update_location(self, location_data: dict):
        return self.client.put("/api/profile/location", json=location_data)
