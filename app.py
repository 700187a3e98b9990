import logging
import os

from flask import Flask
from config import Config
from routes.images import bp as images_bp

def create_app(overrides=None):
    app = Flask(__name__, static_folder=Config.STATIC_DIR)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # ensure dirs exist
    os.makedirs(app.config["UPLOAD_DIR"], exist_ok=True)
    os.makedirs(app.config["RESULT_DIR"], exist_ok=True)

    app.register_blueprint(images_bp)

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
