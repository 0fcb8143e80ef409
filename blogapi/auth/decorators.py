# blogapi/auth/decorators.py
from functools import wraps

from flask import g, request

from blogapi.auth.tokens import verify_token
from blogapi.errors import Unauthenticated


def bearer_token():
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def token_required(f):
    """Exige un Bearer token válido y deja la identidad en ``g.current_user``."""
    @wraps(f)
    def decorated(*args, **kwargs):
        token = bearer_token()
        if token is None:
            raise Unauthenticated("Token required")

        g.current_user = verify_token(token)
        return f(*args, **kwargs)
    return decorated


def is_owner(resource_owner_id, acting_user_id):
    if resource_owner_id is None or acting_user_id is None:
        return False
    return resource_owner_id == acting_user_id
