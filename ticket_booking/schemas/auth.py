"""
Pydantic schemas for admin login and payment details.
"""

from pydantic import BaseModel, SecretStr


class LoginRequest(BaseModel):
    username: str
    password: SecretStr


class PaymentDetails(BaseModel):
    card_number: SecretStr
    expiry: str
    cvv: SecretStr
