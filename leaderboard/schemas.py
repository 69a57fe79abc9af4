"""Pydantic schemas for configuration and ranked output."""

from pydantic import BaseModel, Field, field_validator


class RankerConfig(BaseModel):
    """Scan limits and fallbacks used while locating tables in a sheet."""

    header_scan_rows: int = Field(default=30, ge=1)
    header_max_cells: int = Field(default=40, ge=1)
    spend_search_rows: int = Field(default=40, ge=1)
    spend_scan_columns: int = Field(default=80, ge=1)
    fallback_round_count: int = Field(default=30, ge=1)
    fallback_player_column: int = Field(default=2, ge=1)

    class Config:
        extra = 'forbid'


class RankedEntry(BaseModel):
    """One row of the final standings, serialised with camelCase keys."""

    rank: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    total_points: int | float = Field(..., alias='totalPoints')
    total_spent: float = Field(..., alias='totalSpent')
    spent_per_pt: float = Field(..., alias='spentPerPt')
    tied: bool = False
    scores: list[int | float] = Field(default_factory=list)

    @field_validator('spent_per_pt')
    @classmethod
    def validate_finite(cls, v):
        """Spend-per-point is rendered as a finite number."""
        if v != v or v in (float('inf'), float('-inf')):
            raise ValueError(f'spentPerPt must be finite, got {v}')
        return v

    class Config:
        extra = 'forbid'
        frozen = True
        populate_by_name = True
