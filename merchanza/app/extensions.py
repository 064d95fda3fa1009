from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS

# Singletons (initialized in app factory)
db = SQLAlchemy()
migrate = Migrate(render_as_batch=True)
cors = CORS()
