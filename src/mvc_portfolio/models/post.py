import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text

from mvc_portfolio.models.base import Base


class PostModel(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    # No foreign key: posts may reference authors that live elsewhere
    author_id = Column(String, index=True, nullable=False)
    published = Column(Boolean, nullable=False, default=False)
    tags = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
