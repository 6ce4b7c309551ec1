"""
Number normalization and rounding utilities for emissions calculations.

Stateless helpers shared by the emission and points calculators.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext


class UnitConverter:
    """
    Numeric conversion service.

    Turns loosely typed user input into Decimals and applies the rounding
    rules of the emissions engine.
    """

    KG_PRECISION = Decimal("0.001")
    WHOLE = Decimal("1")
    ZERO = Decimal("0")

    @staticmethod
    def normalize_number(value: str | float | int | Decimal) -> Decimal:
        """
        Normalize a number value to Decimal.

        Handles string inputs with commas, floats, and existing Decimals.

        Args:
            value: Number value in various formats

        Returns:
            Normalized Decimal value

        Raises:
            decimal.InvalidOperation: If the value is not numeric
            ValueError: If the value uses underscore digit grouping (e.g., "1_000")

        Example:
            >>> UnitConverter.normalize_number("1,234.56")
            Decimal('1234.56')
        """

        if isinstance(value, Decimal):
            return value

        if isinstance(value, str):
            # Remove commas from string numbers
            value = value.replace(",", "").strip()
            if "_" in value:
                raise ValueError(f"Underscore digit grouping is not a number: {value!r}")

        return Decimal(str(value))

    @staticmethod
    def to_non_negative_decimal(value) -> Decimal:
        """
        Coerce user input to a non-negative Decimal.

        Anything that is not a finite, non-negative number in float range becomes 0.

        Example:
            >>> UnitConverter.to_non_negative_decimal("abc")
            Decimal('0')
            >>> UnitConverter.to_non_negative_decimal("12.5")
            Decimal('12.5')
        """
        if value is None or isinstance(value, bool):
            return UnitConverter.ZERO

        try:
            number = UnitConverter.normalize_number(value)
        except (InvalidOperation, TypeError, ValueError):
            return UnitConverter.ZERO

        if not number.is_finite() or number <= 0 or not math.isfinite(float(number)):
            return UnitConverter.ZERO

        return number

    @staticmethod
    def _quantize(value: Decimal, exponent: Decimal) -> Decimal:
        # quantize fails when the result has more digits than the context precision
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, value.adjusted() + 5)
            return value.quantize(exponent, rounding=ROUND_HALF_UP)

    @staticmethod
    def round_kg(value: Decimal) -> Decimal:
        """
        Round kilograms to 3 decimals, halves away from zero.

        Example:
            >>> UnitConverter.round_kg(Decimal("1.0005"))
            Decimal('1.001')
        """
        return UnitConverter._quantize(value, UnitConverter.KG_PRECISION)

    @staticmethod
    def round_half_away_from_zero(value: Decimal) -> int:
        """
        Round to the nearest integer, halves away from zero.

        Example:
            >>> UnitConverter.round_half_away_from_zero(Decimal("2.5"))
            3
        """
        return int(UnitConverter._quantize(value, UnitConverter.WHOLE))
