"""Account registration and credential checks for both login pools."""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import AccountInactive, DuplicateEmail, InvalidCredentials
from app.core.security import verify_password, get_password_hash
from app.models.account import Account
from app.models.enums import Role

logger = logging.getLogger(__name__)


def find_account(db: Session, email: str, role: Role) -> Optional[Account]:
    return db.query(Account).filter(Account.email == email, Account.role == role).first()


def register_account(
    db: Session,
    full_name: str,
    email: str,
    password: str,
    phone_number: Optional[str] = None,
    address: Optional[str] = None,
    role: Role = Role.USER,
) -> Account:
    """Create an account in the given pool. Emails are compared exactly as stored."""
    if find_account(db, email, role) is not None:
        raise DuplicateEmail()

    account = Account(
        full_name=full_name,
        email=email,
        password_hash=get_password_hash(password),
        phone_number=phone_number,
        address=address,
        role=role,
        is_active=True,
    )
    db.add(account)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateEmail()
    db.refresh(account)
    logger.info(f"Registered {role.value} account {account.id}")
    return account


def authenticate(db: Session, email: str, password: str, role: Role) -> Account:
    """Verify credentials against one pool.

    Unknown email and wrong password raise the same error. The active flag is
    only looked at once the password matched.
    """
    account = find_account(db, email, role)
    if account is None or not verify_password(password, account.password_hash):
        logger.warning(f"Failed {role.value} login attempt")
        raise InvalidCredentials()

    if not account.is_active:
        raise AccountInactive()

    return account
