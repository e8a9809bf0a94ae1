"""
Request schemas for the OmniLife statistics API.
Every request carries the full habit list and completion records.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from omnilife.models import Habit


class StatsRequest(BaseModel):
    habits: List[Habit] = Field(default_factory=list)
    records: Dict[str, List[str]] = Field(default_factory=dict, description="YYYY-MM-DD -> completed habit IDs")
    year: Optional[int] = Field(None, description="Defaults to the current year")
    today: Optional[date] = Field(None, description="Overrides the server clock")
