from jose import jwt
from app.core.config import settings

# Tokens are issued by the account service; this API only verifies them.
def decode_token(token: str) -> dict:
    """Decode and verify a bearer token. Raises jose.JWTError when invalid or expired."""
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
