from sqlalchemy import Column, JSON, String

from .base import Base


class CountryPriorityProfile(Base):
    """National priority weights (0-100) and optional market-demand index."""
    __tablename__ = "country_priority_profiles"

    country_code = Column(String, primary_key=True)
    name = Column(String)
    priority_weights = Column(JSON)
    market_demand_index = Column(JSON)
