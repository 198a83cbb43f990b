"""Volume strategy output schema."""

from pydantic import BaseModel, Field


class VolumeRecommendation(BaseModel):
    """Weekly volume, rep range and intensity for one muscle."""

    sets_per_week: int = Field(..., ge=0)
    rep_range_lower: int = Field(..., gt=0)
    rep_range_upper: int = Field(..., gt=0)
    intensity: float = Field(
        ..., ge=0.0, le=1.0,
        description="Working load as a fraction of estimated 1RM",
    )
