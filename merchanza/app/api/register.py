from flask import Flask

from merchanza.modules.auth.routes import bp as auth_bp
from merchanza.modules.catalog.routes import bp as catalog_bp
from merchanza.modules.cart.routes import bp as cart_bp
from merchanza.modules.uploads.routes import bp as uploads_bp


def register_api_blueprints(app: Flask) -> None:
    app.register_blueprint(auth_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(uploads_bp)

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "Merchanza API",
            "version": "0.1.0",
            "endpoints": {
                "auth": ["/signup", "/login"],
                "cart": ["/addtocart", "/removefromcart", "/getcart"],
                "catalog": ["/addproduct", "/removeproduct", "/allproducts", "/newcollections", "/popularproducts"],
                "uploads": ["/upload", "/imagelist", "/removeimage", "/images/<filename>"],
            },
        }, 200
