from typing import Any
from fastapi import APIRouter, Body, Depends, HTTPException
from sqlmodel import Session
from shamir_recovery.models.reconstruct_output import ReconstructOutput
from shamir_recovery.models.reconstruction_record import ReconstructionRecord
from shamir_recovery.models.share_set import ShareSet
from shamir_recovery.services.database_service import get_session
from shamir_recovery.services.reconstruction_service import ReconstructionServiceInterface
from shamir_recovery.services.reconstruction_service_factory import get_reconstruction_service

router = APIRouter()

@router.post("/", response_model=ReconstructOutput)
def reconstruct(share_set: ShareSet, service: ReconstructionServiceInterface = Depends(get_reconstruction_service)):
    return service.process(share_set)

@router.post("/document", response_model=ReconstructOutput)
def reconstruct_document(
    name: str,
    document: dict[str, Any] = Body(...),
    service: ReconstructionServiceInterface = Depends(get_reconstruction_service),
):
    try:
        share_set = ShareSet.from_document(name, document)
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise HTTPException(status_code=422, detail=f"malformed share set {name}: {e}")
    return service.process(share_set)

@router.post("/batch", response_model=list[ReconstructOutput])
def reconstruct_batch(share_sets: list[ShareSet], service: ReconstructionServiceInterface = Depends(get_reconstruction_service)):
    return [service.process(share_set) for share_set in share_sets]

@router.get("/{record_id}", response_model=ReconstructOutput)
def get_reconstruction(record_id: int, session: Session = Depends(get_session)):
    record = session.get(ReconstructionRecord, record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Reconstruction not found")
    return record.to_output()
