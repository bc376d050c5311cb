"""
stock_orchestrator.domain

Request-scoped, read-only records derived from upstream payloads.
"""

# Package marker.
