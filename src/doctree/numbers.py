"""Integer formatting for numbering components and page numbers."""

from __future__ import annotations

_ROMAN_NUMERALS = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)

INT_FORMATS = frozenset({"int", "Int", "INT"})
ALPHA_FORMATS = frozenset({"alpha", "Alpha", "ALPHA"})
ROMAN_FORMATS = frozenset({"roman", "Roman", "ROMAN"})
KNOWN_FORMATS = INT_FORMATS | ALPHA_FORMATS | ROMAN_FORMATS


def format_number(
    value: int,
    kind: str = "int",
    *,
    decimals: int = 0,
    decimal_point: str = ".",
    thousands_separator: str = "",
) -> str:
    """Render ``value`` in one of the supported numeral systems.

    Args:
        value: The integer to render.
        kind: ``int``, ``alpha``/``Alpha``, ``roman``/``Roman``. The lowercase
            spelling selects lowercase letters, the capitalized or uppercase
            spelling selects uppercase letters.
        decimals: Number of decimals for ``int``.
        decimal_point: Decimal separator for ``int``.
        thousands_separator: Grouping separator for ``int``.

    Returns:
        The formatted value. Unknown kinds return ``str(value)``.
    """
    if kind in INT_FORMATS:
        return _grouped_decimal(value, decimals, decimal_point, thousands_separator)
    if kind in ALPHA_FORMATS:
        return alpha(value, upper=kind != "alpha")
    if kind in ROMAN_FORMATS:
        return roman(value, upper=kind != "roman")
    return str(value)


def alpha(value: int, *, upper: bool = True) -> str:
    """Bijective base-26 letters: 1 -> A, 26 -> Z, 27 -> AA."""
    if value <= 0:
        return "0"
    letters: list[str] = []
    remaining = value
    while remaining > 0:
        remaining, index = divmod(remaining - 1, 26)
        letters.append(chr(ord("A") + index))
    result = "".join(reversed(letters))
    return result if upper else result.lower()


def roman(value: int, *, upper: bool = True) -> str:
    """Subtractive Roman numeral; negative values keep a leading sign."""
    if value == 0:
        return "0"
    parts: list[str] = []
    if value < 0:
        parts.append("-")
    remaining = abs(value)
    for numeral, amount in _ROMAN_NUMERALS:
        count, remaining = divmod(remaining, amount)
        parts.append(numeral * count)
    result = "".join(parts)
    return result if upper else result.lower()


def _grouped_decimal(
    value: int, decimals: int, decimal_point: str, thousands_separator: str
) -> str:
    if decimals > 0:
        rendered = f"{abs(value):,.{decimals}f}"
    else:
        rendered = f"{abs(value):,}"
    integer_part, _, fraction = rendered.partition(".")
    integer_part = integer_part.replace(",", thousands_separator)
    sign = "-" if value < 0 else ""
    if fraction:
        return f"{sign}{integer_part}{decimal_point}{fraction}"
    return f"{sign}{integer_part}"


class FormattedNumber:
    """An integer that can be rendered in several numeral systems."""

    def __init__(self, value: int = 0) -> None:
        self.value = value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"FormattedNumber({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FormattedNumber):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def format(
        self,
        kind: str = "int",
        *,
        decimals: int = 0,
        decimal_point: str = ".",
        thousands_separator: str = "",
    ) -> str:
        """Render the wrapped value, see :func:`format_number`."""
        return format_number(
            self.value,
            kind,
            decimals=decimals,
            decimal_point=decimal_point,
            thousands_separator=thousands_separator,
        )
