# minicommerce/repos/product_repo.py
from typing import List

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from minicommerce.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self, category_id: int | None = None) -> List[ProductModel]:
        stmt = select(ProductModel).order_by(ProductModel.id)
        if category_id is not None:
            stmt = stmt.where(ProductModel.category_id == category_id)
        return list(self.db.execute(stmt).scalars())

    def sku_taken(self, sku: str, exclude_id: int | None = None) -> bool:
        stmt = select(ProductModel.id).where(ProductModel.sku == sku)
        if exclude_id is not None:
            stmt = stmt.where(ProductModel.id != exclude_id)
        return self.db.execute(select(stmt.exists())).scalar()

    def add_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.flush()

    def decrement_stock(self, product_id: int, quantity: int) -> int:
        """
        Warunkowy update, sprawdzenie stanu robi baza:
        UPDATE products SET stock = stock - q WHERE id = :id AND stock >= q
        Zwraca rowcount, 0 oznacza ze ktos inny wykupil towar w miedzyczasie.
        """
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.stock >= quantity)
            .values(stock=ProductModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
