import logging

from httpx import AsyncClient

from bookcatalog.config import API_URL, LOG_LEVEL
from bookcatalog.mcp.client import BookCatalogClient
from bookcatalog.mcp.server import create_mcp_server


def main():
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(level=LOG_LEVEL)

    http = AsyncClient(base_url=API_URL)
    client = BookCatalogClient(http)
    mcp = create_mcp_server(client)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
