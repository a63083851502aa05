from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MarksCreate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    roll_number: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    grade: str = Field(..., min_length=1)
    section: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    marks: float = Field(..., ge=0, strict=True, allow_inf_nan=False)


class MarksUpdate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    roll_number: str = Field(..., min_length=1, max_length=255)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    grade: Optional[str] = Field(None, min_length=1)
    section: Optional[str] = Field(None, min_length=1)
    subject: Optional[str] = Field(None, min_length=1)
    marks: Optional[float] = Field(None, ge=0, strict=True, allow_inf_nan=False)

    @model_validator(mode="after")
    def require_a_change(self):
        if not self.changes():
            raise ValueError("at least one field besides rollNumber is required")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude={"roll_number"}, exclude_none=True)


class MarksDelete(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    roll_number: str = Field(..., min_length=1, max_length=255)
    subject: Optional[str] = Field(None, min_length=1)


class MarksOut(CamelModel):
    id: str
    roll_number: str
    name: str
    grade: str
    section: str
    subject: str
    marks: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MarksListResponse(CamelModel):
    marks_list: List[MarksOut]
    success: bool = True


class MarksIdResponse(CamelModel):
    id: str
    success: bool = True
