from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from assistant.tools import airline


mcp = FastMCP("airline-loyalty")


@mcp.tool(description=airline.DELTA_DESCRIPTION)
def get_delta_medallion_qualification() -> str:
    return airline.get_delta_medallion_qualification()


@mcp.tool(description=airline.UNITED_DESCRIPTION)
def get_united_premier_qualification() -> str:
    return airline.get_united_premier_qualification()


@mcp.tool(description=airline.COMPARE_DESCRIPTION)
def compare_airline_programs() -> str:
    return airline.compare_airline_programs()


if __name__ == "__main__":
    mcp.run(transport="sse")
