import json
from pathlib import Path
from shamir_recovery.models.share_set import ShareSet


def load_share_set(path: str | Path) -> ShareSet:
    """Read a keyed share-set document from a JSON file, named after the file."""
    path = Path(path)
    with open(path, "r") as f:
        document = json.load(f)
    return ShareSet.from_document(path.stem, document)
