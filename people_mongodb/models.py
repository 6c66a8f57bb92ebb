from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PersonIn(BaseModel):
    # name is required in the collection schema only; nothing here enforces it
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    age: Optional[Union[int, float]] = None
    favorite_foods: List[str] = Field(default_factory=list, alias="favoriteFoods")

    def to_document(self) -> dict:
        """Storage shape, keyed by the collection's field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Person(PersonIn):
    id: str


class DeleteSummary(BaseModel):
    acknowledged: bool = True
    deleted_count: int = 0


def format_person(doc: dict) -> Person:
    """Build a Person from a stored document.

    Only keys present in ``doc`` with a non-null value are set on the
    model, so a projected-out or null field stays unset.
    """
    data = {"id": str(doc.get("_id"))}
    for key in ("name", "age", "favoriteFoods"):
        if doc.get(key) is not None:
            data[key] = doc[key]
    return Person(**data)
