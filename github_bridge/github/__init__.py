"""GitHub REST adapter: typed payloads and the HTTP client."""
