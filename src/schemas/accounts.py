from datetime import datetime

from pydantic import ConfigDict

from database.models.accounts import RoleEnum
from schemas.base import CamelModel

from .examples.accounts import (
    user_registration_request_schema_example,
    user_response_schema_example,
    user_login_request_schema_example,
    user_login_response_schema_example
)


class UserRegistrationRequestSchema(CamelModel):
    email: str
    name: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": user_registration_request_schema_example
        }
    )


class UserResponseSchema(CamelModel):
    id: int
    email: str
    name: str
    role: RoleEnum
    created_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": user_response_schema_example
        }
    )


class UserLoginRequestSchema(CamelModel):
    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": user_login_request_schema_example
        }
    )


class UserLoginResponseSchema(CamelModel):
    token: str
    token_type: str = "bearer"
    email: str
    name: str
    role: RoleEnum

    model_config = ConfigDict(
        json_schema_extra={
            "example": user_login_response_schema_example
        }
    )
