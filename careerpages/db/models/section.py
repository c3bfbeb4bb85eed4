"""
PageSection model: ordered, groupable content blocks of the careers page.
"""
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from careerpages.db.base import Base


class SectionType(str, enum.Enum):
    ABOUT = "ABOUT"
    CULTURE = "CULTURE"
    BENEFITS = "BENEFITS"
    TEAM = "TEAM"
    VALUES = "VALUES"
    CUSTOM = "CUSTOM"


class SectionLayout(str, enum.Enum):
    FULL_WIDTH = "FULL_WIDTH"
    TWO_COLUMN = "TWO_COLUMN"
    THREE_COLUMN = "THREE_COLUMN"


class PageSection(Base):
    __tablename__ = "page_sections"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)

    type = Column(String, nullable=False, default=SectionType.CUSTOM.value)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False, default="")  # markup, may hold "|||"-separated columns
    layout = Column(String, nullable=False, default=SectionLayout.FULL_WIDTH.value)
    is_visible = Column(Boolean, nullable=False, default=True)

    # Placement
    order = Column(Integer, nullable=False, default=0)
    column_group = Column(Integer, nullable=False, default=0)  # side-by-side cluster
    column_index = Column(Integer, nullable=False, default=0)  # position within the cluster

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    company = relationship("Company", back_populates="sections")

    __table_args__ = (
        Index('idx_section_company_order', 'company_id', 'order'),
    )

    def __repr__(self):
        return f"<PageSection(id={self.id}, company_id={self.company_id}, title='{self.title}')>"
