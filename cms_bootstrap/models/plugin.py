from sqlalchemy import Boolean, Column, Integer, String

from cms_bootstrap.database import Base


class Plugin(Base):
    __tablename__ = "plugins"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    status = Column(Boolean, default=False, nullable=False)  # active or not
