"""
CompanyTheme model: per-company branding of the careers page (1:1 with Company).
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from careerpages.db.base import Base

DEFAULT_PRIMARY_COLOR = "#3B82F6"
DEFAULT_SECONDARY_COLOR = "#1E40AF"
DEFAULT_BACKGROUND_COLOR = "#FFFFFF"
DEFAULT_FONT_FAMILY = "Inter"
DEFAULT_FONT_SIZE = "16px"
DEFAULT_ROTATION_INTERVAL_MS = 2000


class CompanyTheme(Base):
    __tablename__ = "company_themes"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)

    # Colors
    primary_color = Column(String, nullable=False, default=DEFAULT_PRIMARY_COLOR)
    secondary_color = Column(String, nullable=False, default=DEFAULT_SECONDARY_COLOR)
    background_color = Column(String, nullable=False, default=DEFAULT_BACKGROUND_COLOR)

    # Media (URLs or inlined data URLs)
    logo_url = Column(Text, nullable=True)
    banner_url = Column(Text, nullable=True)  # legacy single banner
    banner_urls = Column(JSON, nullable=True)  # carousel, ordered
    auto_rotate = Column(Boolean, nullable=False, default=True)
    rotation_interval = Column(Integer, nullable=False, default=DEFAULT_ROTATION_INTERVAL_MS)  # milliseconds
    video_url = Column(Text, nullable=True)

    # Navigation
    header_links = Column(JSON, nullable=True)  # [{"label": ..., "url": ...}]
    footer_text = Column(Text, nullable=True)
    footer_links = Column(JSON, nullable=True)

    # Typography
    font_family = Column(String, nullable=False, default=DEFAULT_FONT_FAMILY)
    font_size = Column(String, nullable=False, default=DEFAULT_FONT_SIZE)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    company = relationship("Company", back_populates="theme")

    def __repr__(self):
        return f"<CompanyTheme(id={self.id}, company_id={self.company_id})>"
