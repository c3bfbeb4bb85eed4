"""
SectionComment model: append-only discussion attached to a page anchor.

The anchor is either a persisted section id or a virtual page region
("header", "footer", "jobs-list", ...), so it is stored as a string and the
owning company is kept on the row.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from careerpages.db.base import Base


class SectionComment(Base):
    __tablename__ = "section_comments"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    section_key = Column(String, nullable=False, index=True)

    user_email = Column(String, nullable=False)
    user_name = Column(String, nullable=True)  # display name at posting time
    content = Column(Text, nullable=False)
    mentions = Column(JSON, nullable=True)  # list of mentioned emails

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    company = relationship("Company", back_populates="comments")

    __table_args__ = (
        Index('idx_comment_company_section', 'company_id', 'section_key'),
    )

    def __repr__(self):
        return f"<SectionComment(id={self.id}, section_key='{self.section_key}', user_email='{self.user_email}')>"
