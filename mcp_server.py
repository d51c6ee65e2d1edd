"""
mcp_server.py — MCP weather server over stdio.

Exposes two tools backed by the National Weather Service API:
- get-alerts(state): active alerts for a two-letter state code
- get-forecast(latitude, longitude): forecast periods for a US coordinate

Run: weather-mcp  (or: python mcp_server.py)
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

import config
from tools import get_alerts, get_forecast

# stderr only; stdout carries the MCP stream
logging.basicConfig(level=config.LOG_LEVEL, stream=sys.stderr)
logger = logging.getLogger(__name__)

mcp = FastMCP("weather")

mcp.tool(name="get-alerts", description="Get weather alerts for a state")(get_alerts)
mcp.tool(name="get-forecast", description="Get weather forecast for a location")(get_forecast)


def main() -> None:
    logger.info("Weather MCP server running on stdio (NWS base %s)", config.NWS_API_BASE)
    try:
        mcp.run(transport="stdio")
    except Exception:
        logger.error("Weather MCP server failed", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
