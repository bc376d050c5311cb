"""
stock_orchestrator.services

Service-layer package.

Responsibilities:
- Compose upstream calls into the availability and recipe-validation views.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake upstream clients.
