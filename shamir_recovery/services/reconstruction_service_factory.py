from fastapi import Depends
from sqlmodel import Session
from shamir_recovery.services.reconstruction_service import ReconstructionServiceInterface
from shamir_recovery.services.reconstruction_service import LagrangeReconstructionService
from shamir_recovery.services.database_service import get_session

def get_reconstruction_service(
    session: Session = Depends(get_session),
) -> ReconstructionServiceInterface:
    return LagrangeReconstructionService(session)
