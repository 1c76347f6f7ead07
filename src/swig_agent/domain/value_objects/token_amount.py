"""
TokenAmount value object - exact decimal amount of a native or SPL asset.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

# Lamports per SOL exponent
SOL_DECIMALS = 9

# Enough digits for any u64 base-unit value at any mint precision
_SCALE_PRECISION = 80

# Lamport and SPL token amounts are u64 on-chain
MAX_BASE_UNITS = 2**64 - 1


@dataclass(frozen=True)
class TokenAmount:
    """
    Human-readable amount paired with the asset's decimal precision.

    Business rules:
    - Value cannot be negative
    - Decimals between 0 and 255 (SPL mint range)
    - Conversion to base units is exact; excess fractional digits are
      rejected rather than rounded
    """

    value: Decimal
    decimals: int = SOL_DECIMALS

    def __post_init__(self):
        """Normalize and validate amount."""
        if not isinstance(self.value, Decimal):
            try:
                object.__setattr__(self, "value", Decimal(str(self.value)))
            except InvalidOperation as e:
                raise ValueError(f"Invalid amount: {self.value}") from e

        if not self.value.is_finite():
            raise ValueError(f"Invalid amount: {self.value}")

        if self.value < 0:
            raise ValueError("Amount cannot be negative")

        if self.decimals < 0 or self.decimals > 255:
            raise ValueError(f"Invalid decimals: {self.decimals}")

    @classmethod
    def from_base_units(cls, raw: Union[int, str], decimals: int) -> "TokenAmount":
        """Build from an integer amount of the smallest unit."""
        with localcontext() as ctx:
            ctx.prec = _SCALE_PRECISION
            value = Decimal(int(raw)).scaleb(-decimals)
        return cls(value=value, decimals=decimals)

    @property
    def base_units(self) -> int:
        """
        Amount in the smallest unit (lamports or raw token units).

        Raises:
            ValueError: If the amount has more fractional digits than the
                asset supports, or does not fit in a u64
        """
        with localcontext() as ctx:
            ctx.prec = _SCALE_PRECISION
            scaled = self.value.scaleb(self.decimals)
            if scaled != scaled.to_integral_value():
                raise ValueError(
                    f"Amount {self.display()} has more than {self.decimals} "
                    "decimal places"
                )
            units = int(scaled)
        if units > MAX_BASE_UNITS:
            ceiling = TokenAmount.from_base_units(MAX_BASE_UNITS, self.decimals)
            raise ValueError(
                f"Amount {self.display()} is too large to transfer "
                f"(maximum {ceiling.display()})"
            )
        return units

    def display(self) -> str:
        """Shortest plain decimal representation (no exponent)."""
        if self.value == 0:
            return "0"
        return format(self.value.normalize(), "f")

    def fixed(self) -> str:
        """Representation padded to the asset's full precision."""
        return format(self.value, f".{self.decimals}f")

    def __str__(self) -> str:
        return self.display()
