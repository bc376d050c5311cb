"""
stock_orchestrator.api

API package for the stock orchestrator service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, error mapping and response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: parse parameters, delegate to services, map errors.
