from passlib.context import CryptContext

from portfolio.core import config

pwd = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=config.PASSWORD_HASH_ROUNDS)

# bcrypt only looks at the first 72 bytes.
_BCRYPT_MAX_BYTES = 72


def _truncate(p: str) -> str:
    b = p.encode("utf-8")
    if len(b) > _BCRYPT_MAX_BYTES:
        return b[:_BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")
    return p


def hash_password(p: str) -> str:
    if p is None:
        raise ValueError("password is required")
    return pwd.hash(_truncate(str(p)))
