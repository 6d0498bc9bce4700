"""Data models for the armory module."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ArmorItem(BaseModel):
    """A single piece of armor available for purchase."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(min_length=1, description='e.g. "new enchanted helmet"')
    cost: float = Field(gt=0, allow_inf_nan=False, description="Cost in gold")
    defense: float = Field(ge=0, allow_inf_nan=False, description="Defense points")

    @property
    def ratio(self) -> float:
        """Defense points per gold."""
        return self.defense / self.cost

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "cost": self.cost,
            "defense": self.defense,
        }


# Ordered catalog of armor items
ArmorVector = list[ArmorItem]
