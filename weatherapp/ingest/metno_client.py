"""met.no Locationforecast 2.0 API client."""

import logging

import httpx

logger = logging.getLogger(__name__)

METNO_BASE_URL = "https://api.met.no"
COMPACT_PATH = "/weatherapi/locationforecast/2.0/compact"
DEFAULT_USER_AGENT = "weatherapp/0.1.0"


class MetNoClient:
    def __init__(
        self,
        base_url: str = METNO_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(self, lat: float, lon: float) -> dict:
        """Fetch the compact forecast for a coordinate pair.

        A single attempt; any status other than 200 raises.
        """
        url = f"{self.base_url}{COMPACT_PATH}"
        params = {"lat": lat, "lon": lon}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            if resp.status_code != 200:
                raise httpx.HTTPStatusError(
                    f"Unexpected status {resp.status_code} from met.no",
                    request=resp.request,
                    response=resp,
                )
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("met.no error for lat=%s lon=%s: %s", lat, lon, e)
            raise
        except httpx.RequestError as e:
            logger.error("met.no request failed for lat=%s lon=%s: %s", lat, lon, e)
            raise
