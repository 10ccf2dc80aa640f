"""VLAN data model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class VlanState(str, Enum):
    """Administrative VLAN state."""

    ACTIVE = "active"
    SUSPEND = "suspend"


class VlanConfig(BaseModel):
    """Observed configuration of one VLAN."""

    vlan_id: int = Field(ge=1, le=4094)
    name: str = ""
    state: str = ""
    trunk_groups: list[str] = Field(default_factory=list)

    @classmethod
    def from_attributes(cls, attributes: dict[str, str]) -> VlanConfig:
        """Build a model from a VLAN attribute map."""
        groups = attributes.get("trunk_groups", "")
        return cls(
            vlan_id=int(attributes["vlan_id"]),
            name=attributes.get("name", ""),
            state=attributes.get("state", ""),
            trunk_groups=[g for g in groups.split(",") if g],
        )

    def to_attributes(self) -> dict[str, str]:
        """Return the textual attribute map form."""
        return {
            "vlan_id": str(self.vlan_id),
            "name": self.name,
            "state": self.state,
            "trunk_groups": ",".join(self.trunk_groups),
        }
