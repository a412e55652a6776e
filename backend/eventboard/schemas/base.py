"""Base for partial-update payloads."""
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class PatchModel(BaseModel):
    """A patch whose explicitly supplied fields are the presence markers.

    Fields left out of the request are absent from `model_fields_set` and are
    never merged. Fields listed in `non_nullable` may be omitted but not set
    to null.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_null(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Field name -> value for every field the caller supplied (id excluded)."""
        return self.model_dump(exclude_unset=True, exclude={"id"})
