from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, Text
from sqlalchemy.orm import relationship
from datetime import datetime, timezone

from virtual_art.data.database import Base


def _now():
    return datetime.now(timezone.utc)


class ArtworkModel(Base):
    __tablename__ = "artworks"

    id = Column(Integer, primary_key=True)
    artist_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=False)
    medium = Column(String(100), nullable=True)
    price = Column(Numeric(12, 2), nullable=False)
    image_url = Column(String(500), nullable=False)
    # sha256 zawartosci obrazka, wykrywanie duplikatow przy uploadzie
    image_hash = Column(String(64), nullable=True, unique=True)

    status = Column(String(20), nullable=False, default="pending")  # pending, published, rejected, sold

    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)

    artist = relationship("UserModel")
