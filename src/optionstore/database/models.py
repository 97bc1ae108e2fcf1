"""
SQLAlchemy database models for optionstore.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base, validates
from sqlalchemy.sql import func


Base = declarative_base()


class StoredOption(Base):
    """One stored option value."""

    __tablename__ = 'stored_options'

    id = Column(Integer, primary_key=True)
    root_path = Column(String(255), nullable=False, index=True)  # e.g. 'Company\Product'
    scope = Column(String(255), nullable=False, index=True)  # 'system' or 'user:<login>'
    group_path = Column(Text, nullable=False, default='')
    key = Column(String(255), nullable=False)
    value = Column(Text, nullable=False, default='')
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint('root_path', 'scope', 'group_path', 'key', name='uq_stored_option'),
    )

    def __repr__(self) -> str:
        return f"<StoredOption(id={self.id}, scope='{self.scope}', key='{self.group_path}\\{self.key}')>"

    @validates('key')
    def validate_key(self, key: str, value: str) -> str:
        if not value:
            raise ValueError("Option key cannot be empty")
        return value
