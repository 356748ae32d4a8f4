# commonlogging_server/main.py
from fastmcp import FastMCP
from commonlogging.di import build_container
from commonlogging.logging import configure_logging
from commonlogging_server.tools.masking import register_masking_tools

def create_app() -> FastMCP:
    """
    Build DI container, create FastMCP host, and register tools.
    Keep the server (protocol) separate from masking/formatting logic.
    """
    container = build_container()
    configure_logging(container.settings)

    mcp = FastMCP(container.settings.MCP_SERVER_NAME, version=container.settings.MCP_SERVER_VERSION)

    # Register tools (thin adapters)
    register_masking_tools(mcp, container.log_helper)

    container.log_helper.info("server ready name={}", container.settings.MCP_SERVER_NAME)
    return mcp


if __name__ == "__main__":
    app = create_app()
    # stdio transport: client (agent/IDE) launches this process and speaks JSON-RPC on stdin/stdout
    app.run(transport="stdio")
