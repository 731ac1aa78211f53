"""Checkout schemas"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from shopwave.utils.validators import normalize_text, require_text, validate_email_address

DEFAULT_COUNTRY = "United States"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    APPLE_PAY = "apple_pay"
    GOOGLE_PAY = "google_pay"


class DeliveryAddress(BaseModel):
    """Delivery address; accepts snake_case or camelCase keys"""
    full_name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip_code: str
    country: str = DEFAULT_COUNTRY

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("full_name", "phone", "address", "city", "state", "zip_code")
    @classmethod
    def not_blank(cls, v):
        return require_text(v)

    @field_validator("email")
    @classmethod
    def valid_email(cls, v):
        return validate_email_address(require_text(v))

    @field_validator("country", mode="before")
    @classmethod
    def default_country(cls, v):
        # Blank or missing falls back to the default
        if v is None:
            return DEFAULT_COUNTRY
        return normalize_text(str(v)) or DEFAULT_COUNTRY


class CheckoutRequest(BaseModel):
    payment_method: PaymentMethod
    delivery_address: DeliveryAddress

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CheckoutResponse(BaseModel):
    """Result of the simulated checkout; nothing here is persisted"""
    success: bool = True
    order_number: str
    payment_method: PaymentMethod
    subtotal: float
    tax: float
    shipping: float
    total: float
    total_items: int
