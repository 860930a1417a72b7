from sqlalchemy import Column, Integer, String, Text

from cms_bootstrap.database import Base


class Variable(Base):
    __tablename__ = "variables"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    value = Column(Text, nullable=True)
