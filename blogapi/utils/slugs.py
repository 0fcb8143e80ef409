# blogapi/utils/slugs.py
from slugify import slugify

from blogapi.models import Blog

# Longitud de la columna Blog.slug
SLUG_MAX = 255
BASE_SLUG_MAX = 200


def generate_unique_slug(title, user_id, exclude_id=None):
    """Genera un slug único agregando un sufijo si ya existe"""
    base_slug = slugify(title, max_length=BASE_SLUG_MAX) or "blog"
    # Un slug numérico chocaría con la búsqueda por id
    if base_slug.isdigit():
        base_slug = f"blog-{base_slug}"
    slug = base_slug
    i = 1
    while _slug_taken(slug, exclude_id):
        suffix = f"-{i}-{user_id}"
        slug = f"{base_slug[:SLUG_MAX - len(suffix)]}{suffix}"
        i += 1
    return slug


def _slug_taken(slug, exclude_id):
    query = Blog.query.filter_by(slug=slug)
    if exclude_id is not None:
        query = query.filter(Blog.id != exclude_id)
    return query.first() is not None
