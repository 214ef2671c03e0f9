import logging

from flask import Flask

from tinydb import TinyDB
from tinydb.storages import MemoryStorage

from config import config
from vc_routes import vc_bp, init_vc_bp


def open_db(db_path=None):
    if db_path is None:
        db_path = config.db_path
    if db_path == ':memory:':
        return TinyDB(storage=MemoryStorage)  # Memory DB
    return TinyDB(db_path)                    # Storage DB


def create_app(db=None):
    if db is None:
        db = open_db()

    app = Flask(__name__)
    app.logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    init_vc_bp(app, db.table("vc"))
    app.register_blueprint(vc_bp)

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    app.run(host=config.host, port=config.port)
