"""
stock_orchestrator.domain.models

Stock reconciliation model.

Responsibilities:
- Coerce loosely-typed upstream quantities into numbers.
- Define the immutable records returned by the core operations.
- Derive per-ingredient results and the overall recipe status.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

Number = int | float

# Inventory services disagree on the quantity field name; first non-null wins.
QUANTITY_FIELDS: tuple[str, ...] = ("cantidad_actual", "stock_actual", "cantidad")


class RecipeStatus(enum.StrEnum):
    # Values are part of the public response contract.
    validated = "VALIDADA"
    partial = "PARCIAL"
    rejected = "RECHAZADA"


def parse_number(value: Any) -> Number | None:
    """
    Parse an untyped payload value as a finite number.
    Returns None for missing, null, boolean and non-numeric values.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return None
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def to_number(value: Any) -> Number:
    # Stock arithmetic only: unreadable or negative quantities count as nothing on hand.
    parsed = parse_number(value)
    if parsed is None or parsed <= 0:
        return 0
    return parsed


def stock_quantity(entry: Any) -> Number:
    if not isinstance(entry, Mapping):
        return 0
    for field in QUANTITY_FIELDS:
        raw = entry.get(field)
        if raw is not None:
            return to_number(raw)
    return 0


@dataclass(frozen=True, slots=True)
class Availability:
    producto: Any
    sucursales: Any

    def to_dict(self) -> dict[str, Any]:
        return {"producto": self.producto, "sucursales": self.sucursales}


@dataclass(frozen=True, slots=True)
class ValidationItem:
    id_producto: Any
    # None when the recipe gives no readable quantity; such an item is never fulfilled.
    solicitado: Number | None
    disponible: Number
    id_sucursal_sugerida: Any | None

    @property
    def fulfilled(self) -> bool:
        return self.solicitado is not None and self.disponible >= self.solicitado

    def to_dict(self) -> dict[str, Any]:
        return {
            "id_producto": self.id_producto,
            "solicitado": self.solicitado,
            "disponible": self.disponible,
            "id_sucursal_sugerida": self.id_sucursal_sugerida,
        }


@dataclass(frozen=True, slots=True)
class ValidationResult:
    id_receta: Any
    estado_sugerido: RecipeStatus
    items: tuple[ValidationItem, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id_receta": self.id_receta,
            "estado_sugerido": self.estado_sugerido.value,
            "items": [i.to_dict() for i in self.items],
        }


def reconcile_item(ingredient: Mapping[str, Any], stock: Any) -> ValidationItem:
    entries: Sequence[Any] = stock if isinstance(stock, list) else []
    requested = parse_number(ingredient.get("cantidad"))

    total: Number = 0
    suggested = None
    matched = False
    for entry in entries:
        qty = stock_quantity(entry)
        total += qty
        # First branch (upstream order) that can serve the whole request on its own.
        if not matched and requested is not None and qty >= requested:
            matched = True
            suggested = entry.get("id_sucursal") if isinstance(entry, Mapping) else None

    return ValidationItem(
        id_producto=ingredient.get("id_producto"),
        solicitado=requested,
        disponible=total,
        id_sucursal_sugerida=suggested,
    )


def derive_status(items: Sequence[ValidationItem]) -> RecipeStatus:
    # An empty recipe is VALIDADA: "every item is fulfilled" holds vacuously.
    if all(i.fulfilled for i in items):
        return RecipeStatus.validated
    if any(i.disponible > 0 for i in items):
        return RecipeStatus.partial
    return RecipeStatus.rejected


# --- Module Notes -----------------------------------------------------------
# Suggestions are first-fit, not best-fit: a later branch with more stock never
# displaces an earlier branch that already covers the request.
