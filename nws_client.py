import logging
from typing import Any

import httpx

import config

logger = logging.getLogger(__name__)

GEO_JSON = "application/geo+json"


def alerts_url(state: str) -> str:
    return f"{config.NWS_API_BASE}/alerts?area={state}"


def points_url(latitude: float, longitude: float) -> str:
    return f"{config.NWS_API_BASE}/points/{latitude:.4f},{longitude:.4f}"


def _client_kwargs() -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if config.NWS_TIMEOUT is not None:
        kwargs["timeout"] = config.NWS_TIMEOUT
    return kwargs


async def make_nws_request(url: str) -> Any | None:
    """GET url from the NWS API. Returns the decoded JSON body, or None on any failure."""
    headers = {"User-Agent": config.USER_AGENT, "Accept": GEO_JSON}

    try:
        async with httpx.AsyncClient(**_client_kwargs()) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as exc:
        logger.error(
            "NWS HTTP error %s for %s", exc.response.status_code, url
        )
    except httpx.TimeoutException:
        logger.error("Request to NWS timed out: %s", url)
    except httpx.RequestError as exc:
        logger.error("NWS unreachable for %s: %s", url, exc)
    except httpx.InvalidURL as exc:
        logger.error("Invalid NWS URL %r: %s", url, exc)
    except ValueError as exc:
        logger.error("NWS returned invalid JSON for %s: %s", url, exc)
    return None
