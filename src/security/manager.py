from datetime import timedelta, datetime, timezone
from typing import Optional

from jose import jwt, ExpiredSignatureError, JWTError

from exceptions.security import TokenExpiredError, InvalidTokenError
from security.interfaces import JWTManagerInterface


class JWTManager(JWTManagerInterface):
    """JWT token manager for handling access tokens.

    Tokens are signed with a single server-held secret and carry an
    issued-at and an expiry claim.
    """

    def __init__(
        self,
        access_secret_key: str,
        access_expires_delta: int,
        algorithm: str
    ) -> None:
        """Initialize the JWT manager with configuration.

        Args:
            access_secret_key (str): Secret key for signing access tokens.
            access_expires_delta (int): Access token expiration time in minutes.
            algorithm (str): JWT signing algorithm (e.g., 'HS384').
        """
        self.access_expires_delta: timedelta = timedelta(
            minutes=access_expires_delta
        )
        self._access_secret_key = access_secret_key
        self._algorithm = algorithm

    def _create_token(
        self, data: dict, secret_key: str, expires_delta: timedelta
    ) -> str:
        to_encode = data.copy()
        issued_at = datetime.now(timezone.utc)
        to_encode.update({"iat": issued_at, "exp": issued_at + expires_delta})

        return jwt.encode(to_encode, key=secret_key, algorithm=self._algorithm)

    def create_access_token(
        self,
        data: dict,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """Create an access token for user authentication.

        Args:
            data (dict): Claims to encode in the access token.
            expires_delta (Optional[timedelta]): Custom expiration time.

        Returns:
            str: Encoded access token.
        """
        return self._create_token(
            data=data,
            secret_key=self._access_secret_key,
            expires_delta=expires_delta if expires_delta else self.access_expires_delta
        )

    def decode_access_token(self, token: str) -> dict:
        """Decode and validate an access token.

        Args:
            token (str): The access token to decode.

        Returns:
            dict: Decoded token claims.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid or malformed.
        """
        try:
            return jwt.decode(
                token,
                self._access_secret_key,
                algorithms=[self._algorithm]
            )
        except ExpiredSignatureError:
            raise TokenExpiredError
        except JWTError:
            raise InvalidTokenError
