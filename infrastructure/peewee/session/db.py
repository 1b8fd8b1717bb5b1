import os

from dotenv import load_dotenv
from playhouse.db_url import connect

load_dotenv()

# SQLite en un único fichero por defecto
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

# Initialize the database connection
db = connect(DATABASE_URL)


def get_db():
    return db


def init_db() -> None:
    """Abre la conexión (si hace falta) y crea la tabla de tareas si no existe."""
    from infrastructure.peewee.model.models import TaskModel

    db.connect(reuse_if_open=True)
    db.create_tables([TaskModel], safe=True)
