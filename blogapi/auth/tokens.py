# blogapi/auth/tokens.py
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app

from blogapi.errors import Unauthenticated


def issue_token(user):
    """Firma un JWT con el id y el email del usuario."""
    now = datetime.now(timezone.utc)
    expires_in = timedelta(hours=current_app.config["JWT_EXPIRES_HOURS"])
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "iat": now,
        "exp": now + expires_in,
    }
    token = jwt.encode(
        payload,
        current_app.config["JWT_SECRET_KEY"],
        algorithm=current_app.config["JWT_ALGORITHM"],
    )
    return token, int(expires_in.total_seconds())


def verify_token(token):
    """
    Verifica firma y expiración del token.
    Devuelve ``{"id", "email"}`` o lanza ``Unauthenticated``.
    """
    try:
        payload = jwt.decode(
            token,
            current_app.config["JWT_SECRET_KEY"],
            algorithms=[current_app.config["JWT_ALGORITHM"]],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise Unauthenticated("Token expired")
    except jwt.InvalidTokenError as e:
        current_app.logger.debug("Token rejected: %s", e)
        raise Unauthenticated("Invalid token")

    email = payload.get("email")
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid token")
    if not email:
        raise Unauthenticated("Invalid token")

    return {"id": user_id, "email": email}
