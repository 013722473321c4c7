from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class Driver(Base):
    __tablename__ = "drivers"
    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(20), nullable=False)

    def __repr__(self) -> str:
        return f"Driver(id={self.id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"
