# ABOUTME: Utilities package initialization for Railway MCP Server
# ABOUTME: Contains shared utilities for transport, formatting, safety, and logging

"""
Railway MCP Utilities Package

Shared utilities:
    - client.py: GraphQL transport with Bearer auth and error aggregation
    - formatting.py: Connection-to-list flattening, input building, JSON text
    - safety.py: Optional read-only guard for mutating tools
    - logging.py: Structured logging with correlation IDs
"""
