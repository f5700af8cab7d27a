"""
Product Entity

Products are referenced by order lines through their ID only; the price an
order line carries is captured on the line, not read from here.

Author: TM3
Date: 2025-10-17
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from order_management.core.exceptions import DomainValidationError
from order_management.domain.order import utc_now


class Product:
    """Catalog product"""

    def __init__(
        self,
        name: str,
        sku: str,
        price: Decimal,
        stock_quantity: int,
        is_active: bool = True,
    ):
        self._validate_name(name)
        self._validate_sku(sku)
        self._validate_price(price)
        self._validate_stock(stock_quantity)

        self._id = uuid4()
        self._name = name
        self._sku = sku
        self._price = Decimal(price)
        self._stock_quantity = stock_quantity
        self._is_active = is_active
        self._created_at = utc_now()

    @classmethod
    def rehydrate(
        cls,
        id: UUID,
        name: str,
        sku: str,
        price: Decimal,
        stock_quantity: int,
        is_active: bool,
        created_at: datetime,
    ) -> "Product":
        product = cls.__new__(cls)
        product._id = id
        product._name = name
        product._sku = sku
        product._price = Decimal(price)
        product._stock_quantity = stock_quantity
        product._is_active = is_active
        product._created_at = created_at
        return product

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def sku(self) -> str:
        return self._sku

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def stock_quantity(self) -> int:
        return self._stock_quantity

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def apply_changes(
        self,
        name: Optional[str] = None,
        sku: Optional[str] = None,
        price: Optional[Decimal] = None,
        stock_quantity: Optional[int] = None,
    ) -> None:
        if name is not None:
            self.update_name(name)
        if sku is not None:
            self.update_sku(sku)
        if price is not None:
            self.update_price(price)
        if stock_quantity is not None:
            self.update_stock_quantity(stock_quantity)

    def update_name(self, name: str) -> None:
        self._validate_name(name)
        self._name = name

    def update_sku(self, sku: str) -> None:
        self._validate_sku(sku)
        self._sku = sku

    def update_price(self, price: Decimal) -> None:
        self._validate_price(price)
        self._price = Decimal(price)

    def update_stock_quantity(self, stock_quantity: int) -> None:
        self._validate_stock(stock_quantity)
        self._stock_quantity = stock_quantity

    @staticmethod
    def _validate_name(name: str) -> None:
        if name is None or not name.strip():
            raise DomainValidationError("Name is required.", {"field": "name"})

    @staticmethod
    def _validate_sku(sku: str) -> None:
        if sku is None or not sku.strip():
            raise DomainValidationError("Sku is required.", {"field": "sku"})

    @staticmethod
    def _validate_price(price: Decimal) -> None:
        if price is None or price < 0:
            raise DomainValidationError("Price must be greater or equal to 0.", {"field": "price"})

    @staticmethod
    def _validate_stock(stock_quantity: int) -> None:
        if stock_quantity is None or stock_quantity < 0:
            raise DomainValidationError(
                "StockQuantity must be greater or equal to 0.", {"field": "stock_quantity"}
            )
