# minicommerce/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import List
from decimal import Decimal
from datetime import datetime


# =====================================================
# USERS
# =====================================================
class UserCreate(BaseModel):
    """Schema dla tworzenia użytkownika."""

    name: str = Field(..., min_length=1, max_length=80, pattern=r"\S", description="Imię użytkownika")
    email: EmailStr = Field(..., max_length=200)


class UserUpdate(UserCreate):
    """Schema dla pełnej aktualizacji użytkownika (PUT)."""


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# =====================================================
# CATEGORIES
# =====================================================
class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=80, pattern=r"\S")


class CategoryUpdate(CategoryCreate):
    pass


class CategoryRead(BaseModel):
    id: int
    name: str
    slug: str

    model_config = ConfigDict(from_attributes=True)


# =====================================================
# PRODUCTS
# =====================================================
class ProductCreate(BaseModel):
    """Schema dla tworzenia produktu."""

    name: str = Field(..., min_length=1, max_length=120, pattern=r"\S")
    sku: str = Field(..., min_length=1, max_length=40, pattern=r"\S")
    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Cena (musi być > 0)")
    stock: int = Field(0, ge=0, description="Stan magazynowy (>= 0)")
    category_id: int = Field(..., gt=0)


class ProductUpdate(ProductCreate):
    """Schema dla pełnej aktualizacji produktu (PUT)."""


class ProductPatch(BaseModel):
    """Schema dla częściowej aktualizacji produktu (PATCH), pola None są pomijane."""

    name: str | None = Field(None, min_length=1, max_length=120, pattern=r"\S")
    sku: str | None = Field(None, min_length=1, max_length=40, pattern=r"\S")
    price: Decimal | None = Field(None, gt=0, max_digits=12, decimal_places=2)
    stock: int | None = Field(None, ge=0)
    category_id: int | None = Field(None, gt=0)


class ProductRead(BaseModel):
    id: int
    name: str
    sku: str
    price: Decimal
    stock: int
    category_id: int
    category_name: str


# =====================================================
# ORDERS
# =====================================================
class OrderItemIn(BaseModel):
    """Pozycja zamówienia w requeście."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    quantity: int = Field(..., ge=1, description="Ilość produktu (musi być >= 1)")


class OrderCreate(BaseModel):
    """Schema dla tworzenia zamówienia."""

    user_id: int = Field(..., gt=0, description="ID użytkownika (musi być > 0)")
    items: List[OrderItemIn] = Field(..., min_length=1)


class OrderStatusPatch(BaseModel):
    status: str = Field(..., min_length=1)


class OrderLineOut(BaseModel):
    product_id: int | None
    product_name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    id: int
    user_id: int | None
    status: str
    total: Decimal
    created_at: datetime
    items: List[OrderLineOut]


# =====================================================
# REVIEWS
# =====================================================
class ReviewCreate(BaseModel):
    user_id: int = Field(..., gt=0)
    product_id: int = Field(..., gt=0)
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = Field(None, max_length=600)


class ReviewPatch(BaseModel):
    rating: int | None = Field(None, ge=1, le=5)
    comment: str | None = Field(None, max_length=600)


class ReviewRead(BaseModel):
    id: int
    user_id: int
    product_id: int
    rating: int
    comment: str | None

    model_config = ConfigDict(from_attributes=True)


# =====================================================
# ERRORS
# =====================================================
class FieldViolation(BaseModel):
    field: str
    message: str


class ApiError(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    violations: List[FieldViolation] | None = None
