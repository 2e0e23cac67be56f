"""
Per-class counters behind the sequential identifiers (V<n>, C<n>, S<n>).
The row is locked and bumped inside the same transaction as the insert it
numbers, and it never goes down when records are deleted.
"""

from sqlalchemy import Column, Integer, String
from dealership.database import Base


class IdCounter(Base):
    __tablename__ = "id_counters"

    entity_class = Column(String(32), primary_key=True)
    last_value = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<IdCounter {self.entity_class}={self.last_value}>"
