"""Authentication API."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import AuthenticationError
from app.core.security import CurrentAccount, create_access_token, get_current_account
from app.models.account import Account
from app.models.enums import Role
from app.schemas.account import AccountResponse, AuthResponse, LoginRequest, RegisterRequest
from app.services.accounts import authenticate, register_account

router = APIRouter()


def _auth_response(account: Account) -> AuthResponse:
    token = create_access_token(account.id, account.email, account.role)
    return AuthResponse(
        id=account.id,
        full_name=account.full_name,
        email=account.email,
        role=account.role,
        access_token=token,
    )


@router.post("/register", response_model=AuthResponse)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    account = register_account(
        db,
        full_name=request.full_name,
        email=request.email,
        password=request.password,
        phone_number=request.phone_number,
        address=request.address,
    )
    return _auth_response(account)


@router.post("/login", response_model=AuthResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    account = authenticate(db, request.email, request.password, Role.USER)
    return _auth_response(account)


@router.post("/admin/login", response_model=AuthResponse)
def admin_login(request: LoginRequest, db: Session = Depends(get_db)):
    account = authenticate(db, request.email, request.password, Role.ADMIN)
    return _auth_response(account)


@router.get("/me", response_model=AccountResponse)
def get_me(current: CurrentAccount = Depends(get_current_account), db: Session = Depends(get_db)):
    account = db.query(Account).filter(Account.id == current.id).first()
    if account is None:
        raise AuthenticationError("Account no longer exists")
    return account
