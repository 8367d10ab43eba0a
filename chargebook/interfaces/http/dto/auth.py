from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chargebook.domain.users.entities import PublicUser


class RegisterRequestDTO(BaseModel):
    """Missing fields default to empty; the use case rejects empties."""

    model_config = ConfigDict(validate_by_name=True, coerce_numbers_to_str=True)

    full_name: str = Field("", alias="fullName", max_length=255)
    email: str = Field("", max_length=255)
    phone: str = Field("", max_length=20)
    password: str = ""

    @field_validator("full_name", "email", "phone")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: str = ""
    password: str = ""

    @field_validator("email")
    @classmethod
    def _strip_email(cls, value: str) -> str:
        return value.strip()


class RegisterSuccessDTO(BaseModel):
    success: bool = True
    message: str = "Registration successful"


class PublicUserDTO(BaseModel):
    id: int
    full_name: str = Field(serialization_alias="fullName")
    email: str

    @classmethod
    def from_domain(cls, user: PublicUser) -> PublicUserDTO:
        return cls(id=user.id, full_name=user.full_name, email=user.email)


class LoginSuccessDTO(BaseModel):
    success: bool = True
    token: str
    user: PublicUserDTO
