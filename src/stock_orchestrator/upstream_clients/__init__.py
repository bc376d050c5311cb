"""
stock_orchestrator.upstream_clients

Upstream client package.

Responsibilities:
- Provide the timeout-bounded HTTP wrapper used for every upstream call.
- Provide typed clients for the catalog, inventory and recipes services.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should depend on this boundary (not on httpx or routers directly).
