import os

# BDD en memoria para todos los tests; debe fijarse antes de importar las sesiones
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("ORM", "peewee")
