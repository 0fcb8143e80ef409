# blogapi/routes/auth.py
from flask import Blueprint, current_app, g, jsonify
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blogapi.auth.decorators import token_required
from blogapi.auth.tokens import issue_token
from blogapi.errors import Conflict, NotFound, Unauthenticated
from blogapi.extensions import db
from blogapi.models import User
from blogapi.utils.validation import get_json_body, require_fields, validate_registration

auth_bp = Blueprint("auth", __name__)

BAD_CREDENTIALS = "Invalid credentials"


@auth_bp.route("/register", methods=["POST"])
def register():
    data = get_json_body()
    username, email, password = validate_registration(data)

    existing = User.query.filter(
        or_(User.username == username, User.email == email)
    ).first()
    if existing:
        raise Conflict("Username or email already registered")

    user = User(username=username, email=email)
    user.set_password(password)

    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        # Otro registro con el mismo email/username ganó la carrera
        db.session.rollback()
        raise Conflict("Username or email already registered")
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("Error registering user %s", username)
        return jsonify({"error": "Error registering user", "details": str(e)}), 500

    current_app.logger.info("User registered: id=%s username=%s", user.id, user.username)
    return jsonify({
        "message": "User registered",
        "id": user.id,
        "user": user.to_dict(),
    }), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = get_json_body()
    require_fields(data, ["email", "password"])

    email = data["email"].strip().lower()
    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(data["password"]):
        current_app.logger.info("Failed login for %s", email)
        raise Unauthenticated(BAD_CREDENTIALS)

    token, expires_in = issue_token(user)
    current_app.logger.info("Login ok: id=%s username=%s", user.id, user.username)

    return jsonify({
        "token": token,
        "token_type": "Bearer",
        "expires_in": expires_in,
        "user": user.to_dict(),
    }), 200


@auth_bp.route("/me", methods=["GET"])
@token_required
def me():
    user = db.session.get(User, g.current_user["id"])
    if not user:
        raise NotFound("User not found")
    return jsonify({"user": user.to_dict()}), 200
