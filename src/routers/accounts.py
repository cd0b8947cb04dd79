from fastapi import APIRouter, status, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from config.dependencies import (
    PolicyRoute,
    get_auth_service,
    get_current_identity
)
from exceptions.services import DomainValidationError, InvalidCredentialsError
from schemas.accounts import (
    UserRegistrationRequestSchema,
    UserResponseSchema,
    UserLoginRequestSchema,
    UserLoginResponseSchema
)
from security.policy import Identity
from services.accounts import AuthService

router = APIRouter(route_class=PolicyRoute)


@router.post(
    "/register",
    response_model=UserResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Register a new CUSTOMER account with email, name and password.",
    responses={
        400: {
            "description": "Invalid input or email already registered",
            "content": {
                "application/json": {
                    "examples": {
                        "duplicate": {
                            "summary": "Duplicate Email",
                            "value": {
                                "detail": "Email already registered: user@example.com"
                            }
                        },
                        "weak_password": {
                            "summary": "Weak Password",
                            "value": {
                                "detail": "Password must contain at least one letter and one number"
                            }
                        }
                    }
                }
            }
        }
    },
)
async def register_user(
    data: UserRegistrationRequestSchema,
    auth_service: AuthService = Depends(get_auth_service)
) -> UserResponseSchema:
    """Register a new user.

    Args:
        data: Registration data (email, name, password).
        auth_service: Authentication service.

    Returns:
        UserResponseSchema: The registered user, without the password hash.
    """
    try:
        user = await auth_service.register(
            email=data.email,
            name=data.name,
            password=data.password
        )
    except DomainValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except SQLAlchemyError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred during user creation."
        ) from e

    return UserResponseSchema.model_validate(user)


@router.post(
    "/login",
    response_model=UserLoginResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="User login",
    description="Authenticate with email and password and receive a bearer token.",
    responses={
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {"detail": "Invalid email or password"}
                }
            }
        }
    },
)
async def login_user(
    data: UserLoginRequestSchema,
    auth_service: AuthService = Depends(get_auth_service)
) -> UserLoginResponseSchema:
    """Authenticate user and return a JWT access token.

    Args:
        data: Login credentials (email, password).
        auth_service: Authentication service.

    Returns:
        UserLoginResponseSchema: Token and basic account information.
    """
    try:
        result = await auth_service.login(data.email, data.password)
    except (InvalidCredentialsError, DomainValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message
        )

    return UserLoginResponseSchema(
        token=result.token,
        email=result.user.email,
        name=result.user.name,
        role=result.user.role
    )


@router.get(
    "/me",
    response_model=UserResponseSchema,
    summary="Current user",
    description="Return the account the bearer token belongs to.",
)
async def get_me(
    identity: Identity = Depends(get_current_identity),
    auth_service: AuthService = Depends(get_auth_service)
) -> UserResponseSchema:
    user = await auth_service.get_user_by_id(identity.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return UserResponseSchema.model_validate(user)
