from peewee import BooleanField, Model, TextField
from playhouse.sqlite_ext import AutoIncrementField

from infrastructure.peewee.session.db import db


class TaskModel(Model):
    # AUTOINCREMENT: SQLite no reutiliza ids de filas borradas
    id = AutoIncrementField()
    title = TextField(default="")
    is_done = BooleanField(default=False)

    class Meta:
        database = db
        table_name = "tasks"
