"""Validation for admin product form submissions.

The admin screen submits product fields as dictionaries. These validators
make sure the required fields are present and well-formed.

On validation failure, raise `ValidationError` with structured
`field_errors` so the caller can show a single "fill in all required
fields" rejection.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from .errors import REQUIRED_FIELDS_MESSAGE, ValidationError
from .models import Category

# Field names as shown on the admin form.
FIELD_LABELS: Dict[str, str] = {
    "name": "Название",
    "brand": "Бренд",
    "price": "Цена",
    "category": "Категория",
    "image": "Изображение",
    "stock": "Наличие",
    "discount": "Скидка",
}


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def _strip(v: Any) -> str:
    return _as_str(v).strip()


def _label(field: str, label: Optional[str] = None) -> str:
    return label or FIELD_LABELS.get(field, field)


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def require_str(payload: Dict[str, Any], field: str, errors: Dict[str, str], *, label: Optional[str] = None) -> str:
    value = _strip(payload.get(field))
    if not value:
        add_error(errors, field, f"{_label(field, label)}: обязательное поле")
    return value


def parse_bool(payload: Dict[str, Any], field: str, errors: Dict[str, str], *, default: bool = True, label: Optional[str] = None) -> bool:
    v = payload.get(field)
    if v is None:
        return default
    if isinstance(v, bool):
        return v
    s = _strip(v).lower()
    if s in ("true", "1", "yes", "y", "on"):
        return True
    if s in ("false", "0", "no", "n", "off"):
        return False
    add_error(errors, field, f"{_label(field, label)}: ожидается да/нет")
    return default


def parse_int(payload: Dict[str, Any], field: str, errors: Dict[str, str], *, min_value: Optional[int] = None, max_value: Optional[int] = None, required: bool = False) -> int:
    label = _label(field)
    raw = payload.get(field)
    if raw is None or _strip(raw) == "":
        if required:
            add_error(errors, field, f"{label}: обязательное поле")
        return 0
    if isinstance(raw, bool):
        add_error(errors, field, f"{label}: должно быть целым числом")
        return 0
    try:
        val = int(str(raw).strip())
    except ValueError:
        add_error(errors, field, f"{label}: должно быть целым числом")
        return 0
    if min_value is not None and val < min_value:
        add_error(errors, field, f"{label}: не меньше {min_value}")
    if max_value is not None and val > max_value:
        add_error(errors, field, f"{label}: не больше {max_value}")
    return val


def validate_in(value: Any, allowed: Iterable[str], errors: Dict[str, str], field: str) -> str:
    raw = _strip(value.value if isinstance(value, Category) else value)
    if raw not in set(allowed):
        add_error(errors, field, f"{_label(field)}: недопустимое значение")
    return raw


def raise_if_errors(errors: Dict[str, str], message: str = REQUIRED_FIELDS_MESSAGE) -> None:
    if errors:
        raise ValidationError(field_errors=errors, message=message)


def validate_product_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a complete admin product form and return normalized fields.

    Name and brand must be non-empty and the price must be set. A price of
    exactly 0 counts as "not filled in", so free products cannot be saved.
    Stock accepts booleans or the usual form strings ("true"/"false",
    "1"/"0", "yes"/"no", "on"/"off").
    """
    errors: Dict[str, str] = {}

    name = require_str(payload, "name", errors)
    brand = require_str(payload, "brand", errors)
    price = parse_int(payload, "price", errors, min_value=0, required=True)
    if "price" not in errors and price == 0:
        add_error(errors, "price", f"{FIELD_LABELS['price']}: обязательное поле")

    category = validate_in(payload.get("category"), [c.value for c in Category], errors, "category")
    stock = parse_bool(payload, "stock", errors, default=True)

    discount: Optional[int] = None
    if payload.get("discount") is not None:
        discount = parse_int(payload, "discount", errors, min_value=0, max_value=100)

    raise_if_errors(errors)

    return {
        "name": name,
        "brand": brand,
        "price": price,
        "category": Category(category),
        "image": _as_str(payload.get("image")),
        "stock": stock,
        "discount": discount,
    }
