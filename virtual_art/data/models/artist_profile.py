from sqlalchemy import Column, Integer, String, DateTime, Numeric, Float, ForeignKey, JSON
from sqlalchemy.orm import relationship
from datetime import datetime, timezone

from virtual_art.data.database import Base


class ArtistProfileModel(Base):
    __tablename__ = "artist_profiles"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)

    artist_name = Column(String(255), nullable=False)
    bio = Column(String(300), nullable=True)
    portfolio_link = Column(String(500), nullable=True)
    art_style = Column(String(100), nullable=True)
    location = Column(String(255), nullable=True)
    social_links = Column(JSON, nullable=False, default=dict)

    years_experience = Column(Integer, nullable=False, default=0)
    exhibitions = Column(Integer, nullable=False, default=0)
    awards_won = Column(Integer, nullable=False, default=0)
    artworks_sold = Column(Integer, nullable=False, default=0)
    total_sales = Column(Numeric(12, 2), nullable=False, default=0)
    avg_rating = Column(Float, nullable=False, default=0.0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    user = relationship("UserModel", back_populates="artist_profile")
