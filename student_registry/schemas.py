from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StudentCreate(BaseModel):
    # any "Id" in the payload is ignored, the store always mints a new one
    model_config = ConfigDict(populate_by_name=True, strict=True)

    name: str = Field("", alias="Name")
    age: int = Field(0, alias="Age")
    score: int = Field(0, alias="Score")

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        """Accept "NAME", "age", ... for the aliased keys; an exact alias wins."""
        if not isinstance(data, dict):
            return data
        aliases = {f.alias.lower(): f.alias for f in cls.model_fields.values() if f.alias}
        folded = dict(data)
        for key, value in data.items():
            alias = aliases.get(key.lower()) if isinstance(key, str) else None
            if alias is not None and alias not in data:
                folded.setdefault(alias, value)
        return folded


class Student(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="Id")
    name: str = Field("", alias="Name")
    age: int = Field(0, alias="Age")
    score: int = Field(0, alias="Score")
