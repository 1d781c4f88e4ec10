# minicommerce/services/category_service.py
from typing import List

from sqlalchemy.orm import Session

from minicommerce.data.database import unit_of_work
from minicommerce.data.models.category import CategoryModel
from minicommerce.domain.errors import ConflictError, NotFoundError
from minicommerce.domain.schemas import CategoryCreate, CategoryRead, CategoryUpdate
from minicommerce.repos.category_repo import CategoryRepo
from minicommerce.utils.logging import get_logger
from minicommerce.utils.slug import slugify

logger = get_logger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = CategoryRepo(db)

    def create_category(self, payload: CategoryCreate) -> CategoryRead:
        name = payload.name.strip()
        slug = slugify(name)

        with unit_of_work(self.db):
            if self.repo.name_or_slug_taken(name, slug):
                raise ConflictError("Category already exists")
            created = self.repo.add_category(CategoryModel(name=name, slug=slug))

        logger.info(f"Category {created.id} created with slug '{created.slug}'")
        return CategoryRead.model_validate(created)

    def list_categories(self) -> List[CategoryRead]:
        return [CategoryRead.model_validate(c) for c in self.repo.list_categories()]

    def get_category(self, category_id: int) -> CategoryRead:
        return CategoryRead.model_validate(self._require(category_id))

    def update_category(self, category_id: int, payload: CategoryUpdate) -> CategoryRead:
        name = payload.name.strip()
        slug = slugify(name)

        with unit_of_work(self.db):
            category = self._require(category_id)
            if self.repo.name_or_slug_taken(name, slug, exclude_id=category.id):
                raise ConflictError("Category already exists")

            category.name = name
            category.slug = slug

        logger.info(f"Category {category_id} renamed, slug '{slug}'")
        return CategoryRead.model_validate(category)

    def delete_category(self, category_id: int) -> None:
        """
        RESTRICT: kategorii z produktami nie usuwamy (409),
        najpierw trzeba usunac albo przeniesc produkty.
        """
        with unit_of_work(self.db):
            category = self._require(category_id)
            if self.repo.has_products(category.id):
                logger.warning(f"Refusing to delete category {category_id}: it still has products")
                raise ConflictError("Category has products; delete or move products first")
            self.repo.delete_category(category)

        logger.info(f"Category {category_id} deleted")

    def _require(self, category_id: int) -> CategoryModel:
        category = self.repo.get_category(category_id)
        if not category:
            raise NotFoundError("Category not found")
        return category
