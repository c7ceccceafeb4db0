"""
Data model for rows of the productos table.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence


@dataclass
class Product:
    """A row of the productos table."""

    id_producto: str
    nombre: str
    precio: Decimal = Decimal("0")
    stock: int = 0

    def __post_init__(self):
        if not isinstance(self.precio, Decimal):
            self.precio = Decimal(str(self.precio))

    @classmethod
    def from_row(cls, row: Sequence) -> "Product":
        """Build a product from (id_producto, nombre, precio, stock)."""
        return cls(
            id_producto=str(row[0]),
            nombre=row[1],
            precio=row[2],
            stock=int(row[3]),
        )
