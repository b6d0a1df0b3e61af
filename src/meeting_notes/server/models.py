from pydantic import BaseModel
from typing import List, Optional

class SummaryRequest(BaseModel):
    text: str
    k: Optional[int] = None
    target: Optional[str] = None

class NoteDTO(BaseModel):
    text: str
    count: int

class SummaryResponse(BaseModel):
    summary: str
    notes: List[NoteDTO]
    target: Optional[str] = None
