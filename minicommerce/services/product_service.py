# minicommerce/services/product_service.py
from typing import List

from sqlalchemy.orm import Session

from minicommerce.data.database import unit_of_work
from minicommerce.data.models.category import CategoryModel
from minicommerce.data.models.product import ProductModel
from minicommerce.domain.errors import ConflictError, NotFoundError
from minicommerce.domain.schemas import ProductCreate, ProductPatch, ProductRead, ProductUpdate
from minicommerce.repos.category_repo import CategoryRepo
from minicommerce.repos.product_repo import ProductRepo
from minicommerce.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepo(db)
        self.categories = CategoryRepo(db)

    #query
    def list_products(self, category_id: int | None = None) -> List[ProductRead]:
        return [self.to_response(p) for p in self.repo.list_products(category_id)]

    def get_product(self, product_id: int) -> ProductRead:
        return self.to_response(self._require(product_id))

    #commands
    def create_product(self, payload: ProductCreate) -> ProductRead:
        sku = payload.sku.strip()

        with unit_of_work(self.db):
            if self.repo.sku_taken(sku):
                raise ConflictError("SKU already exists")
            category = self._require_category(payload.category_id)

            created = self.repo.add_product(
                ProductModel(
                    name=payload.name.strip(),
                    sku=sku,
                    price=payload.price,
                    stock=payload.stock,
                    category=category,
                )
            )

        logger.info(f"Product {created.id} ({sku}) created in category {category.id}")
        return self.to_response(created)

    def update_product(self, product_id: int, payload: ProductUpdate) -> ProductRead:
        return self.patch_product(product_id, ProductPatch(**payload.model_dump()))

    def patch_product(self, product_id: int, payload: ProductPatch) -> ProductRead:
        changes = payload.model_dump(exclude_none=True)

        with unit_of_work(self.db):
            product = self._require(product_id)

            if "name" in changes:
                product.name = changes["name"].strip()

            if "sku" in changes:
                sku = changes["sku"].strip()
                if sku != product.sku and self.repo.sku_taken(sku, exclude_id=product.id):
                    raise ConflictError("SKU already exists")
                product.sku = sku

            if "price" in changes:
                product.price = changes["price"]

            #stan ustawiany wprost, zamowienia zdejmuja go warunkowym updatem
            if "stock" in changes:
                product.stock = changes["stock"]

            if "category_id" in changes:
                product.category = self._require_category(changes["category_id"])

        logger.info(f"Product {product_id} updated: {sorted(changes)}")
        return self.to_response(product)

    def delete_product(self, product_id: int) -> None:
        with unit_of_work(self.db):
            self.repo.delete_product(self._require(product_id))

        logger.info(f"Product {product_id} deleted")

    @staticmethod
    def to_response(product: ProductModel) -> ProductRead:
        return ProductRead(
            id=product.id,
            name=product.name,
            sku=product.sku,
            price=product.price,
            stock=product.stock,
            category_id=product.category.id,
            category_name=product.category.name,
        )

    def _require(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def _require_category(self, category_id: int) -> CategoryModel:
        category = self.categories.get_category(category_id)
        if not category:
            raise NotFoundError("Category not found")
        return category
