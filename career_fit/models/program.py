from sqlalchemy import Column, DateTime, JSON, String, Text

from .base import Base


class CareerProgram(Base):
    """
    Career/education program reference data.

    values_profile is written only by the value-mapping batch
    (career_fit.valuemap.writer.persist_values_profile).
    """
    __tablename__ = "career_programs"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    category = Column(String)
    description = Column(Text)
    onet_code = Column(String, index=True)

    interest_profile = Column(JSON)
    values_profile = Column(JSON)
    subject_needs = Column(JSON)
    priorities = Column(JSON)
    learning_style_fit = Column(JSON)

    values_crosswalk_version = Column(String)
    values_updated_at = Column(DateTime)
