# inventory/db/models/items.py
from sqlalchemy import Column, Float, Integer, String

from inventory.db.base import Base


class Item(Base):
    __tablename__ = "items"

    """A single inventory entry: what it is, what it costs and how many are on hand.

    ``id`` is generated by the database on insert; an id of 0 marks an item
    that has not been stored yet.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)

    def __repr__(self):
        return f"Item(id={self.id!r}, name={self.name!r}, price={self.price!r}, quantity={self.quantity!r})"
