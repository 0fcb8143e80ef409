# blogapi/routes/__init__.py
from flask import Flask


def register_routes(app: Flask):
    """
    Registrar todos los blueprints de la carpeta routes.
    Se llama desde blogapi.create_app().
    """
    # Import local para evitar import circular al inicializar la app
    from .auth import auth_bp
    from .blog_routes import blog_bp
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(blog_bp, url_prefix="/api/blogs")
