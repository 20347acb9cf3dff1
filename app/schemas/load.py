"""
Training load schemas.

Chronic load (CTL) and acute load (ATL) are exponentially-weighted moving
averages of daily training stress with 42- and 7-day time constants:

    ctl(d) = ctl(d-1) + (stress(d) - ctl(d-1)) / 42
    atl(d) = atl(d-1) + (stress(d) - atl(d-1)) / 7

The balance ``ctl - atl`` is positive when fresh and negative when fatigue
has accumulated.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class LoadProfile(BaseModel):
    """Chronic/acute load at the end of ``as_of``.

    Recomputed on demand from the full session history, never persisted.
    A profile can be handed back to the load model as a checkpoint.
    """

    ctl: float = Field(0.0, ge=0.0, description="Chronic training load (fitness)")
    atl: float = Field(0.0, ge=0.0, description="Acute training load (fatigue)")
    as_of: Optional[datetime.date] = Field(
        None,
        description="Last simulated day (None when there is no history)",
    )

    @property
    def balance(self) -> float:
        """Training stress balance, ``ctl - atl``."""
        return self.ctl - self.atl

    @property
    def has_history(self) -> bool:
        return not (self.ctl == 0 and self.atl == 0)


class LoadProfileResponse(BaseModel):
    """Load profile returned by the analytics endpoint."""

    ctl: float
    atl: float
    balance: float
    as_of: datetime.date
    sessions_considered: int = Field(
        ..., description="Number of sessions on or before ``as_of``",
    )
