# blogapi/utils/validation.py
import re

from flask import request

from blogapi.errors import ValidationError

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

USERNAME_MAX = 50
EMAIL_MAX = 120
TITLE_MAX = 255

# Rango de una columna INTEGER de 64 bits
ID_MAX = 2 ** 63 - 1
PAGE_MAX = 1_000_000


def get_json_body():
    """Cuerpo JSON como dict; cualquier otra cosa es un error 400."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_fields(data, fields):
    missing = [f for f in fields if not _is_filled(data.get(f))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def _is_filled(value):
    return isinstance(value, str) and value.strip() != ""


def clean_string(data, field, max_length=None):
    value = data.get(field)
    if not _is_filled(value):
        raise ValidationError(f"'{field}' must be a non-empty string")
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"'{field}' must be at most {max_length} characters")
    return value


def validate_registration(data):
    require_fields(data, ["username", "email", "password"])

    username = clean_string(data, "username", USERNAME_MAX)
    email = clean_string(data, "email", EMAIL_MAX).lower()
    if not EMAIL_RE.match(email):
        raise ValidationError("'email' is not a valid address")

    # La contraseña se guarda tal cual llega, sin strip
    return username, email, data["password"]


def _ascii_int(raw):
    # isdigit() acepta dígitos Unicode que int() rechaza
    if not (raw.isascii() and raw.isdigit()) or len(raw) > len(str(ID_MAX)):
        return None
    return int(raw)


def parse_id(value):
    """Id entero positivo en rango, o None si el texto no lo es."""
    number = _ascii_int(str(value))
    if number is None or not 1 <= number <= ID_MAX:
        return None
    return number


def _positive_arg(name, default, maximum):
    raw = request.args.get(name)
    if raw is None:
        return default
    number = _ascii_int(raw.strip())
    if number is None or not 1 <= number <= maximum:
        raise ValidationError(f"'{name}' must be an integer between 1 and {maximum}")
    return number


def parse_paging(default_per_page, max_per_page):
    page = _positive_arg("page", 1, PAGE_MAX)
    # per_page por encima del tope se recorta, no es un error
    per_page = _positive_arg("per_page", default_per_page, ID_MAX)
    return page, min(per_page, max_per_page)
