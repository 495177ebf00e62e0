"""Request bodies accepted by the JSON API."""
from __future__ import annotations

import re
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, StringConstraints, field_validator

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")

ProductCategory = Literal["revamping", "styling", "wig-installation", "retouching", "ventilation"]


class LoginRequest(BaseModel):
    email: str
    password: Annotated[str, Field(min_length=6)]

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        value = (value or "").strip().lower()
        if not EMAIL_PATTERN.fullmatch(value):
            raise ValueError("Valid email required")
        return value


class AdminCreateRequest(BaseModel):
    email: str = ""
    password: str = ""
    full_name: str = ""


class ProductCreate(BaseModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    description: Optional[Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]] = None
    price: Annotated[float, Field(ge=0)]
    image_url: Optional[str] = None
    category: ProductCategory


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    image_url: Optional[str] = None
    category: Optional[str] = None


class BookingCreate(BaseModel):
    customer_name: str = ""
    customer_phone: str = ""
    customer_email: Optional[str] = ""
    service_name: str = ""
    booking_date: str = ""
    booking_time: str = ""
    notes: Optional[str] = ""


class BookingStatusUpdate(BaseModel):
    status: str


class ServiceCreate(BaseModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    description: Optional[str] = ""
    price: Optional[float] = None
    duration: Union[str, int, None] = ""
