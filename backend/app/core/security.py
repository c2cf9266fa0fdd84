"""Security utilities for JWT authentication."""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
import jwt
from jwt.exceptions import PyJWTError
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.config import settings
from app.core.exceptions import AuthenticationError, Forbidden
from app.models.enums import Role

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentAccount:
    """Identity of the caller, taken from the token claims."""
    id: int
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def can_access(self, owner_id: int) -> bool:
        return self.is_admin or self.id == owner_id


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_access_token(account_id: int, email: str, role: Role, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"sub": str(account_id), "email": email, "role": role.value, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> CurrentAccount:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return CurrentAccount(id=int(payload["sub"]), email=payload["email"], role=Role(payload["role"]))
    except (PyJWTError, KeyError, ValueError):
        raise AuthenticationError("Invalid token")

async def get_current_account(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> CurrentAccount:
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    return decode_access_token(credentials.credentials)

async def require_user(account: CurrentAccount = Depends(get_current_account)) -> CurrentAccount:
    if account.role != Role.USER:
        raise Forbidden("This action requires a customer account")
    return account

async def require_admin(account: CurrentAccount = Depends(get_current_account)) -> CurrentAccount:
    if account.role != Role.ADMIN:
        raise Forbidden("This action requires an admin account")
    return account
