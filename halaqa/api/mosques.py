"""
Mosque directory endpoints.
"""

from ..exceptions import ValidationError
from .client import ApiClient
from .payload import as_list, unwrap


class MosquesApi:
    """
    Browsing mosques before enrolling.

    Listing takes the backend's filter params as keyword arguments; search
    matches the query against name and location on the server.
    """

    def __init__(self, client: ApiClient):
        self.client = client

    def list_mosques(self, **params) -> list:
        body = self.client.get("/api/mosques", params=params or None)
        return as_list(unwrap(body, "mosques"))

    def get_mosque(self, mosque_id) -> dict:
        mosque = unwrap(self.client.get(f"/api/mosques/{mosque_id}"), "mosque")
        return mosque if isinstance(mosque, dict) else {}

    def search(self, query: str) -> list:
        if not query or not query.strip():
            raise ValidationError("Search query cannot be empty")
        body = self.client.get("/api/mosques/search", params={"query": query.strip()})
        return as_list(unwrap(body, "mosques"))
