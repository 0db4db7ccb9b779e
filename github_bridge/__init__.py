"""GitHub MCP bridge.

A stdio MCP server that exposes read-only GitHub REST operations as tools:
- Newline-delimited JSON-RPC 2.0 on stdin/stdout
- A fixed catalogue of six tools (users, repos, issues, PRs, commits, files)
- Plain-text tool results formatted for LLM callers
"""

__version__ = "1.0.0"
