# minicommerce/services/review_service.py
from typing import List

from sqlalchemy.orm import Session

from minicommerce.data.database import unit_of_work
from minicommerce.data.models.review import ReviewModel
from minicommerce.domain.errors import NotFoundError
from minicommerce.domain.schemas import ReviewCreate, ReviewPatch, ReviewRead
from minicommerce.repos.product_repo import ProductRepo
from minicommerce.repos.review_repo import ReviewRepo
from minicommerce.repos.user_repo import UserRepo
from minicommerce.utils.logging import get_logger

logger = get_logger(__name__)


class ReviewService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ReviewRepo(db)
        self.users = UserRepo(db)
        self.products = ProductRepo(db)

    def create_review(self, payload: ReviewCreate) -> ReviewRead:
        with unit_of_work(self.db):
            user = self.users.get_user(payload.user_id)
            if not user:
                raise NotFoundError("User not found")
            product = self.products.get_product(payload.product_id)
            if not product:
                raise NotFoundError("Product not found")

            created = self.repo.add_review(
                ReviewModel(user=user, product=product, rating=payload.rating, comment=payload.comment)
            )

        logger.info(f"Review {created.id} added for product {product.id} by user {user.id}")
        return ReviewRead.model_validate(created)

    def list_reviews(self, product_id: int | None = None) -> List[ReviewRead]:
        return [ReviewRead.model_validate(r) for r in self.repo.list_reviews(product_id)]

    def get_review(self, review_id: int) -> ReviewRead:
        return ReviewRead.model_validate(self._require(review_id))

    def patch_review(self, review_id: int, payload: ReviewPatch) -> ReviewRead:
        with unit_of_work(self.db):
            review = self._require(review_id)
            if payload.rating is not None:
                review.rating = payload.rating
            if payload.comment is not None:
                review.comment = payload.comment

        logger.info(f"Review {review_id} updated")
        return ReviewRead.model_validate(review)

    def delete_review(self, review_id: int) -> None:
        with unit_of_work(self.db):
            self.repo.delete_review(self._require(review_id))

        logger.info(f"Review {review_id} deleted")

    def _require(self, review_id: int) -> ReviewModel:
        review = self.repo.get_review(review_id)
        if not review:
            raise NotFoundError("Review not found")
        return review
