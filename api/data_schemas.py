"""Pydantic data schemas for road network input validation."""

from pydantic import AliasChoices, BaseModel, Field
from typing import List, Literal, Optional


class NodeRecord(BaseModel):
    """Schema for a network node (entry point, intersection or destination)."""

    id: str = Field(min_length=1, description="Unique node identifier (e.g., 'market_square')")
    name: str = Field(default="", description="Display name")
    category: Literal["entry", "intersection", "destination"] = Field(
        default="intersection",
        validation_alias=AliasChoices("category", "type"),
        description="Node category"
    )
    latitude: float = Field(default=0.0, ge=-90, le=90)
    longitude: float = Field(default=0.0, ge=-180, le=180)
    is_destination_of_interest: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_destination_of_interest", "isTemple"),
        description="True for temple gates and other destinations of interest"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "temple_main",
                "name": "Kachi Dham Temple Main Entrance",
                "category": "destination",
                "latitude": 30.7370,
                "longitude": 79.0710,
                "is_destination_of_interest": True
            }
        }


class EdgeRecord(BaseModel):
    """Schema for a road segment between two nodes."""

    from_node: str = Field(validation_alias=AliasChoices("from", "from_node"), description="Source node ID")
    to_node: str = Field(validation_alias=AliasChoices("to", "to_node"), description="Target node ID")
    distance: Optional[float] = Field(None, gt=0, description="Road length (km), defaults to 1")
    travel_time: Optional[float] = Field(
        None, gt=0,
        validation_alias=AliasChoices("travel_time", "travelTime"),
        description="Free flow travel time (minutes), defaults to distance"
    )
    capacity: Optional[float] = Field(None, gt=0, description="Road capacity (vehicles), defaults to 100")
    current_load: Optional[float] = Field(
        None, ge=0,
        validation_alias=AliasChoices("current_load", "currentLoad"),
        description="Vehicles currently on the road"
    )
    speed_limit: Optional[float] = Field(
        None, gt=0,
        validation_alias=AliasChoices("speed_limit", "speedLimit"),
        description="Speed limit (km/h)"
    )
    road_class: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("road_class", "roadType", "road_type"),
        description="Road class tag (main, secondary, temple)"
    )
    bidirectional: bool = Field(default=True, description="Also create the reverse road")

    class Config:
        json_schema_extra = {
            "example": {
                "from": "city_center",
                "to": "market_square",
                "distance": 1.2,
                "travel_time": 10,
                "capacity": 500,
                "speed_limit": 40,
                "road_class": "main",
                "bidirectional": True
            }
        }

    def edge_attributes(self) -> dict:
        """Attributes to pass to NetworkGraph.add_edge, omitting unset values."""
        attrs = self.model_dump(
            include={"distance", "travel_time", "capacity", "current_load", "speed_limit", "road_class"},
            exclude_none=True
        )
        attrs["bidirectional"] = self.bidirectional
        return attrs


class NetworkDefinition(BaseModel):
    """Complete road network definition."""

    nodes: List[NodeRecord] = Field(description="Nodes in insertion order")
    edges: List[EdgeRecord] = Field(description="Edges in insertion order")
