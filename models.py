# models.py
from sqlalchemy import Column, Integer, String, Numeric
from database import Base


class Book(Base):
    __tablename__ = "books"
    # AUTOINCREMENT keeps ids monotonic, deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False, index=True)
    author = Column(String, nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    published_year = Column(Integer, nullable=False)
