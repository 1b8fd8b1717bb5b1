from sqlalchemy import Boolean, Column, Integer, Text

from infrastructure.sqlalchemy.session.db import Base


class TaskModel(Base):
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False, default="")
    is_done = Column(Boolean, nullable=False, default=False)
