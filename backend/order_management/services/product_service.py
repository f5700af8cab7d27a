"""
Product Service - CRUD over the product catalog
"""
from typing import List, Optional, Sequence
from uuid import UUID

from order_management.core.exceptions import NotFoundError
from order_management.domain.product import Product
from order_management.repositories.interfaces import ProductStore
from order_management.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from order_management.services.common import value_for_update
from order_management.services.observers import LoggingObserver, ServiceObserver, observed


class ProductService:

    def __init__(self, repository: ProductStore, observers: Optional[Sequence[ServiceObserver]] = None):
        self.repository = repository
        self.observers = list(observers) if observers is not None else [LoggingObserver()]

    @observed("product.create")
    def create(self, request: ProductCreate) -> ProductResponse:
        product = Product(
            name=request.name,
            sku=request.sku,
            price=request.price,
            stock_quantity=request.stock_quantity,
            is_active=request.is_active,
        )
        self.repository.add(product)
        return ProductResponse.from_domain(product)

    @observed("product.update")
    def update(self, product_id: UUID, request: ProductUpdate) -> ProductResponse:
        product = self._get_product(product_id)

        product.apply_changes(
            name=value_for_update(request.name),
            sku=value_for_update(request.sku),
            price=request.price,
            stock_quantity=request.stock_quantity,
        )

        self.repository.update(product)
        return ProductResponse.from_domain(product)

    @observed("product.delete")
    def delete(self, product_id: UUID) -> bool:
        self._get_product(product_id)
        self.repository.delete(product_id)
        return True

    @observed("product.get")
    def get_by_id(self, product_id: UUID) -> ProductResponse:
        return ProductResponse.from_domain(self._get_product(product_id))

    @observed("product.list")
    def get_all(self) -> List[ProductResponse]:
        return [ProductResponse.from_domain(p) for p in self.repository.find_all()]

    def _get_product(self, product_id: UUID) -> Product:
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product
