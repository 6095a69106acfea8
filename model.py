# model.py
from sqlalchemy import Boolean, Column, Integer, String, Float, Text
from database import Base

class Hazard(Base):
    __tablename__ = "hazards"

    id = Column(String, primary_key=True, index=True)  # client-generated
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)
    title = Column(String, default="Untitled")
    description = Column(Text, default="")
    category = Column(String, default="pothole")
    votes = Column(Integer, default=0)
    resolved = Column(Boolean, default=False)
    # ISO-8601 text, so ordering by it is ordering by creation time
    createdAt = Column("created_at", String, index=True, nullable=False)
    photo = Column(Text, nullable=True)  # base64 data URI
