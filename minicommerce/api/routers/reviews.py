# minicommerce/api/routers/reviews.py
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from minicommerce.data.database import get_db
from minicommerce.domain.schemas import ReviewCreate, ReviewPatch, ReviewRead
from minicommerce.services.review_service import ReviewService

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


def get_service(db: Session = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


@router.post("", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
def create_review(payload: ReviewCreate, response: Response, svc: ReviewService = Depends(get_service)):
    created = svc.create_review(payload)
    response.headers["Location"] = f"/api/reviews/{created.id}"
    return created


@router.get("", response_model=List[ReviewRead])
def list_reviews(
    product_id: int | None = Query(None, alias="productId"),
    svc: ReviewService = Depends(get_service),
):
    return svc.list_reviews(product_id)


@router.get("/{review_id}", response_model=ReviewRead)
def get_review(review_id: int, svc: ReviewService = Depends(get_service)):
    return svc.get_review(review_id)


@router.patch("/{review_id}", response_model=ReviewRead)
def patch_review(review_id: int, payload: ReviewPatch, svc: ReviewService = Depends(get_service)):
    return svc.patch_review(review_id, payload)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(review_id: int, svc: ReviewService = Depends(get_service)):
    svc.delete_review(review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
