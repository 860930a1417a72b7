from sqlalchemy import Column, Integer, String

from cms_bootstrap.database import Base


class NodeType(Base):
    """A content type; only ``slug`` is read when building the snapshot."""

    __tablename__ = "node_types"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    slug = Column(String(100), unique=True, nullable=False)
    name = Column(String(255), nullable=True)
