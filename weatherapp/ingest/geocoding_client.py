"""Nominatim (OpenStreetMap) geocoding client."""

import logging

import httpx

logger = logging.getLogger(__name__)

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"
DEFAULT_USER_AGENT = "weatherapp/0.1.0"


class NominatimClient:
    def __init__(
        self,
        base_url: str = NOMINATIM_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def search(self, city: str) -> list[dict]:
        """Return candidate matches for a free-text place name, best first.

        An empty list means nothing matched. A payload that is not a list
        (Nominatim reports service errors as an object) raises ValueError.
        """
        url = f"{self.base_url}/search"
        params = {"q": city, "format": "json", "limit": 1}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Nominatim error for q=%s: %s", city, e)
            raise
        except httpx.RequestError as e:
            logger.error("Nominatim request failed for q=%s: %s", city, e)
            raise

        if not isinstance(data, list):
            logger.warning("Unexpected Nominatim payload for q=%s: %r", city, data)
            raise ValueError(f"Unexpected Nominatim payload for q={city}")
        return data
