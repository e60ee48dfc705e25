from pydantic import BaseModel, Field

class ShareRecord(BaseModel):
    index: int
    base: int = Field(ge=2, le=36)
    value: str = Field(min_length=1)
