from typing import Any
from pydantic import BaseModel, Field
from shamir_recovery.models.share_record import ShareRecord

METADATA_KEY = "keys"

class ShareSet(BaseModel):
    """
    A threshold share set. `shares` keeps the order the shares were supplied in,
    which is the order reconstruction picks them.
    """
    name: str
    n: int = Field(ge=1)
    k: int = Field(ge=1)
    shares: list[ShareRecord]

    @classmethod
    def from_document(cls, name: str, document: dict[str, Any]) -> "ShareSet":
        """
        Build a share set from the keyed document format:
        {"keys": {"n": 4, "k": 3}, "1": {"base": "10", "value": "4"}, ...}
        Shares are ordered by ascending index whatever order the keys are listed in.
        """
        if METADATA_KEY not in document:
            raise ValueError(f"share set {name!r} has no {METADATA_KEY!r} entry")
        keys = document[METADATA_KEY]

        shares = [
            ShareRecord(index=index, base=record["base"], value=record["value"])
            for index, record in document.items()
            if index != METADATA_KEY
        ]
        shares.sort(key=lambda share: share.index)
        return cls(name=name, n=keys["n"], k=keys["k"], shares=shares)
