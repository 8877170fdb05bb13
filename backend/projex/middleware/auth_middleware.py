from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError, jwt
from projex.database import get_db
from projex.exceptions import Unauthorized
from projex.models.account import Account
from projex.config import settings

security = HTTPBearer(auto_error=False)

ALGORITHM = "HS256"


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise Unauthorized("Invalid or expired token")


def get_current_account(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> Account:
    if credentials is None:
        raise Unauthorized("No token, authorization denied")
    payload = decode_token(credentials.credentials)
    account_id = payload.get("sub")
    if account_id is None:
        raise Unauthorized("Invalid token payload")

    try:
        account_key = int(account_id)
    except (TypeError, ValueError):
        raise Unauthorized("Invalid token payload")
    account = db.query(Account).filter(Account.account_id == account_key).first()
    if not account:
        raise Unauthorized("Account not found")
    return account
