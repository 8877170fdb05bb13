"""Auth Service 도메인 서비스 레이어입니다. 계정 등록, 자격 증명 확인, 토큰 발급을 담당합니다."""

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import jwt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from projex.config import settings
from projex.exceptions import ConflictError, InvalidCredentials, PersistenceError, ValidationError
from projex.models.account import Account

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
# bcrypt 는 72바이트 이후 입력을 무시하거나 거부한다.
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        return False
    return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))


def create_access_token(account: Account) -> str:
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": str(account.account_id),
        "email": account.email,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def register(db: Session, email: str | None, password: str | None) -> Account:
    email = (email or "").strip()
    if not email or not password:
        raise ValidationError("Email and password are required.")
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes.")

    account = Account(email=email, password_hash=hash_password(password))
    db.add(account)
    try:
        db.commit()
    except IntegrityError:
        # 동시 가입도 unique 제약에서 한 건만 통과한다.
        db.rollback()
        raise ConflictError("User already exists.")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[auth] failed to register account")
        raise PersistenceError()
    db.refresh(account)
    logger.info("[auth] registered account %s", account.account_id)
    return account


def authenticate(db: Session, email: str | None, password: str | None) -> Account:
    email = (email or "").strip()
    if not email or not password:
        raise InvalidCredentials()
    account = db.query(Account).filter(Account.email == email).first()
    if not account or not verify_password(password, account.password_hash):
        raise InvalidCredentials()
    return account


def login(db: Session, email: str | None, password: str | None) -> tuple[Account, str]:
    account = authenticate(db, email, password)
    return account, create_access_token(account)
