"""Built-in formatting helpers available to ``helper_method`` columns."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Callable, Dict

Helper = Callable[..., object]

_HUMAN_SIZE_UNITS: tuple[str, ...] = ("KB", "MB", "GB", "TB")

_REGISTRY: Dict[str, Helper] = {}


def register_helper(name: str) -> Callable[[Helper], Helper]:
    """Register the decorated callable as the default helper called ``name``."""

    def decorator(func: Helper) -> Helper:
        _REGISTRY[name] = func
        return func

    return decorator


def default_helpers() -> dict[str, Helper]:
    return dict(_REGISTRY)


def _strip_insignificant_zeros(text: str) -> str:
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


@register_helper("number_to_human_size")
def number_to_human_size(value: object, precision: int = 3) -> str | None:
    """Format a byte count as ``"1.46 KB"`` using ``precision`` significant digits."""

    if value is None:
        return None
    number = float(value)  # type: ignore[arg-type]
    if abs(number) < 1024:
        count = int(number)
        return f"{count} {'Byte' if count == 1 else 'Bytes'}"

    scaled = number
    unit_index = -1
    while abs(scaled) >= 1024 and unit_index < len(_HUMAN_SIZE_UNITS) - 1:
        scaled /= 1024
        unit_index += 1

    integer_digits = len(str(int(abs(scaled))))
    decimals = max(precision - integer_digits, 0)
    formatted = _strip_insignificant_zeros(f"{round(scaled, decimals):.{decimals}f}")
    return f"{formatted} {_HUMAN_SIZE_UNITS[unit_index]}"


@register_helper("truncate")
def truncate(text: object, length: int = 30, omission: str = "...") -> str | None:
    if text is None:
        return None
    value = str(text)
    if len(value) <= length:
        return value
    stop = max(length - len(omission), 0)
    return value[:stop] + omission


@register_helper("number_with_precision")
def number_with_precision(value: object, precision: int = 3) -> str | None:
    if value is None:
        return None
    return f"{float(value):.{precision}f}"  # type: ignore[arg-type]


@register_helper("number_with_delimiter")
def number_with_delimiter(value: object, delimiter: str = ",") -> str | None:
    """Group the integer digits of ``value``; numeric strings are accepted.

    Strings that do not parse as numbers are returned unchanged.
    """

    if value is None:
        return None
    number = value
    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return value
    return f"{number:,}".replace(",", delimiter)


@register_helper("round_to")
def round_to(value: float, digits: int = 0) -> float:
    return round(value, digits)


__all__ = [
    "default_helpers",
    "number_to_human_size",
    "number_with_delimiter",
    "number_with_precision",
    "register_helper",
    "round_to",
    "truncate",
]
