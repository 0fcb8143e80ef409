# blogapi/routes/blog_routes.py
from flask import Blueprint, current_app, g, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from blogapi.auth.decorators import is_owner, token_required
from blogapi.errors import Forbidden, NotFound, ValidationError
from blogapi.extensions import db
from blogapi.models import Blog
from blogapi.utils.slugs import generate_unique_slug
from blogapi.utils.validation import (
    TITLE_MAX,
    clean_string,
    get_json_body,
    parse_id,
    parse_paging,
    require_fields,
)

blog_bp = Blueprint("blogs", __name__)

EDITABLE_FIELDS = ("title", "content")


def find_blog(identifier):
    """Busca un blog por id numérico o por slug."""
    blog_id = parse_id(identifier)
    if blog_id is not None:
        blog = db.session.get(Blog, blog_id)
    else:
        # Los slugs nunca son solo dígitos: ids fuera de rango acaban en 404
        blog = Blog.query.filter_by(slug=str(identifier)).first()
    if not blog:
        raise NotFound("Blog not found")
    return blog


def load_owned_blog(blog_id):
    blog = find_blog(blog_id)
    user = g.current_user

    # 🔒 Solo el dueño puede modificar o borrar
    if not is_owner(blog.author_id, user["id"]):
        current_app.logger.warning(
            "Ownership denied: user=%s blog=%s owner=%s", user["id"], blog.id, blog.author_id
        )
        raise Forbidden("Only the author can modify this blog")
    return blog


def paginated(query):
    page, per_page = parse_paging(
        current_app.config["BLOGS_PER_PAGE"], current_app.config["BLOGS_MAX_PER_PAGE"]
    )
    pagination = query.order_by(Blog.created_at.desc(), Blog.id.desc()) \
                      .paginate(page=page, per_page=per_page, error_out=False)
    return {
        "blogs": [b.to_dict() for b in pagination.items],
        "total": pagination.total,
        "page": pagination.page,
        "pages": pagination.pages,
        "per_page": pagination.per_page,
    }


# 🟣 Listar blogs (paginado + filtro opcional por autor)
@blog_bp.route("", methods=["GET"])
def list_blogs():
    query = Blog.query
    author_id = request.args.get("author_id")
    if author_id is not None:
        parsed = parse_id(author_id)
        if parsed is None:
            raise ValidationError("'author_id' must be a positive integer")
        query = query.filter_by(author_id=parsed)
    return jsonify(paginated(query)), 200


@blog_bp.route("/mine", methods=["GET"])
@token_required
def list_my_blogs():
    query = Blog.query.filter_by(author_id=g.current_user["id"])
    return jsonify(paginated(query)), 200


# 🔵 Ver un blog (por id o slug)
@blog_bp.route("/<string:identifier>", methods=["GET"])
def get_blog(identifier):
    return jsonify(find_blog(identifier).to_dict()), 200


# 🟢 Crear un blog
@blog_bp.route("", methods=["POST"])
@token_required
def create_blog():
    user = g.current_user
    data = get_json_body()
    require_fields(data, EDITABLE_FIELDS)

    title = clean_string(data, "title", TITLE_MAX)
    content = clean_string(data, "content")

    # authorId del cuerpo se ignora: el dueño es siempre quien firma el token
    blog = Blog(
        title=title,
        content=content,
        slug=generate_unique_slug(title, user["id"]),
        author_id=user["id"],
    )

    try:
        db.session.add(blog)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("Error saving blog for user %s", user["id"])
        return jsonify({"error": "Error saving blog", "details": str(e)}), 500

    current_app.logger.info("Blog created: id=%s author=%s", blog.id, blog.author_id)
    return jsonify(blog.to_dict()), 201


# 🟡 Editar blog (solo dueño)
@blog_bp.route("/<int:blog_id>", methods=["PUT"])
@token_required
def update_blog(blog_id):
    blog = load_owned_blog(blog_id)
    data = get_json_body()

    if not any(field in data for field in EDITABLE_FIELDS):
        raise ValidationError("Nothing to update: send 'title' and/or 'content'")

    changes = {}
    if "title" in data:
        changes["title"] = clean_string(data, "title", TITLE_MAX)
    if "content" in data:
        changes["content"] = clean_string(data, "content")

    # Slug nuevo solo si el título realmente cambió
    if "title" in changes and changes["title"] != blog.title:
        blog.slug = generate_unique_slug(changes["title"], blog.author_id, exclude_id=blog.id)
    for field, value in changes.items():
        setattr(blog, field, value)

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("Error updating blog %s", blog_id)
        return jsonify({"error": "Error updating blog", "details": str(e)}), 500

    current_app.logger.info("Blog updated: id=%s", blog.id)
    return jsonify(blog.to_dict()), 200


# 🔴 Borrar blog (solo dueño)
@blog_bp.route("/<int:blog_id>", methods=["DELETE"])
@token_required
def delete_blog(blog_id):
    blog = load_owned_blog(blog_id)

    try:
        db.session.delete(blog)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("Error deleting blog %s", blog_id)
        return jsonify({"error": "Error deleting blog", "details": str(e)}), 500

    current_app.logger.info("Blog deleted: id=%s", blog_id)
    return "", 204
