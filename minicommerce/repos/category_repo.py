# minicommerce/repos/category_repo.py
from typing import List

from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session

from minicommerce.data.models.category import CategoryModel
from minicommerce.data.models.product import ProductModel


class CategoryRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_category(self, category_id: int) -> CategoryModel | None:
        return self.db.get(CategoryModel, category_id)

    def list_categories(self) -> List[CategoryModel]:
        return list(self.db.execute(select(CategoryModel).order_by(CategoryModel.id)).scalars())

    def name_or_slug_taken(self, name: str, slug: str, exclude_id: int | None = None) -> bool:
        stmt = select(CategoryModel.id).where(
            or_(func.lower(CategoryModel.name) == name.lower(), CategoryModel.slug == slug)
        )
        if exclude_id is not None:
            stmt = stmt.where(CategoryModel.id != exclude_id)
        return self.db.execute(select(stmt.exists())).scalar()

    def has_products(self, category_id: int) -> bool:
        stmt = select(ProductModel.id).where(ProductModel.category_id == category_id)
        return self.db.execute(select(stmt.exists())).scalar()

    def add_category(self, category: CategoryModel) -> CategoryModel:
        self.db.add(category)
        self.db.flush()
        return category

    def delete_category(self, category: CategoryModel) -> None:
        self.db.delete(category)
        self.db.flush()
