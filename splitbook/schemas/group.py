from pydantic import BaseModel
from typing import List, Optional

class GroupCreate(BaseModel):
    name: str
    members: List[str] = []

class GroupOut(BaseModel):
    name: str

    class Config:
        from_attributes = True

class MutationOut(BaseModel):
    ok: bool = True
    warning: Optional[str] = None
    id: Optional[str] = None

    def payload(self) -> dict:
        return self.model_dump(exclude_none=True)
