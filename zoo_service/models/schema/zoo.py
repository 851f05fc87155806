from sqlalchemy import Column, String, JSON
from zoo_service.core.db import Base


class ZooRow(Base):
    __tablename__ = "zoo_store"

    id = Column(String, primary_key=True)
    value = Column(JSON, nullable=False)
