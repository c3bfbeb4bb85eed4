"""
Company model: the tenant root owning one careers page.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from careerpages.db.base import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, nullable=False, unique=True, index=True)  # URL identifier
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Publish state
    is_published = Column(Boolean, default=False, nullable=False)
    last_saved_at = Column(DateTime(timezone=True), nullable=True)
    last_published_at = Column(DateTime(timezone=True), nullable=True)
    published_snapshot = Column(JSON, nullable=True)  # theme + visible sections + active jobs

    # Bumped on every save, checked when the editor sends it back
    draft_version = Column(Integer, default=1, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    theme = relationship("CompanyTheme", back_populates="company", uselist=False, cascade="all, delete-orphan")
    sections = relationship("PageSection", back_populates="company", cascade="all, delete-orphan")
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")
    users = relationship("User", back_populates="company", cascade="all, delete-orphan")
    comments = relationship("SectionComment", back_populates="company", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Company(id={self.id}, slug='{self.slug}', published={self.is_published})>"
