"""Base Pydantic schemas shared by TalentMatch models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TalentMatchBaseModel(BaseModel):
    """Base Pydantic model for all schemas with common configuration."""

    model_config = ConfigDict(
        # Allow construction from row-like objects
        from_attributes=True,
        # Validate on assignment
        validate_assignment=True,
        # Use enum values instead of enum members
        use_enum_values=True,
        # camelCase on the wire, snake_case in Python
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Dump as JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
