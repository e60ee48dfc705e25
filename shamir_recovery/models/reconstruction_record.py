from datetime import datetime, timezone
from sqlmodel import Field, SQLModel
from shamir_recovery.models.reconstruct_output import ReconstructOutput

class ReconstructionRecord(SQLModel, table=True):
    __tablename__ = "reconstructions"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    threshold: int
    total_shares: int
    secret: str | None = None
    error_kind: str | None = None
    error: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_output(self) -> ReconstructOutput:
        return ReconstructOutput(
            name=self.name,
            secret=self.secret,
            error_kind=self.error_kind,
            error=self.error,
            record_id=self.id,
        )
