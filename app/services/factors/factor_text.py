"""
Two-column text import/export of factor tables.

Format: a header row (``mode,kg_per_km`` or ``item,kg_per_meal``) followed by
one ``name,value`` row per factor.
"""

import logging
import math

from app.pydantic_models.emission_factor import EmissionFactorTable
from app.utils.constants import FactorCategory

logger = logging.getLogger(__name__)

DELIMITER = ","


def _format_factor(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _parse_factor(value: str) -> float | None:
    # float() accepts "1_0"; plain numeric text does not
    if "_" in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def serialize_factors_to_text(
    factors: EmissionFactorTable, category: FactorCategory | str
) -> str:
    """
    Export one category of a factor table as text.

    Example:
        >>> serialize_factors_to_text(EmissionFactorTable(transport={"Bus": 0.06}, electricity=0.7), "transport")
        'mode,kg_per_km\\nBus,0.06\\n'
    """
    category = FactorCategory(category)
    mapping = getattr(factors, category.value)

    lines = [category.header]
    lines.extend(
        f"{name}{DELIMITER}{_format_factor(value)}" for name, value in mapping.items()
    )
    return "\n".join(lines) + "\n"


def parse_factors_from_text(text: str, category: FactorCategory | str) -> dict[str, float]:
    """
    Import factors from text, best effort.

    The first non-blank line is a header and is skipped. Rows with an empty
    name, an empty value, or a value that is not a non-negative number are
    dropped.

    Args:
        text: Exported text
        category: Category the rows belong to

    Returns:
        Mapping of name to factor, in row order
    """
    category = FactorCategory(category)
    lines = [line for line in text.split("\n") if line.strip()]

    factors: dict[str, float] = {}
    for line in lines[1:]:
        fields = [field.strip() for field in line.split(DELIMITER)]
        name = fields[0]
        value = fields[1] if len(fields) > 1 else ""

        factor = _parse_factor(value) if value else None
        if not name or factor is None:
            logger.debug(f"Dropping {category.value} factor row {line!r}")
            continue

        factors[name] = factor

    return factors
