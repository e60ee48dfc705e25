from pydantic import BaseModel
from shamir_recovery.services.errors import ErrorKind

class ReconstructOutput(BaseModel):
    name: str
    secret: str | None = None
    error_kind: ErrorKind | None = None
    error: str | None = None
    record_id: int | None = None
