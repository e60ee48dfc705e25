import logging
from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from sqlmodel import Session

from shamir_recovery.models.point import Point
from shamir_recovery.models.reconstruct_output import ReconstructOutput
from shamir_recovery.models.reconstruction_record import ReconstructionRecord
from shamir_recovery.models.share_set import ShareSet
from shamir_recovery.services.base_decoder import decode
from shamir_recovery.services.errors import InvalidDigit, ReconstructionError, ThresholdNotMet
from shamir_recovery.services.interpolation import constant_term
from shamir_recovery.services.number_format import to_decimal

logger = logging.getLogger(__name__)


class ReconstructionServiceInterface(ABC):

    @abstractmethod
    def reconstruct(self, share_set: ShareSet, indices: Sequence[int] | None = None) -> int:
        pass

    @abstractmethod
    def process(self, share_set: ShareSet) -> ReconstructOutput:
        pass


class LagrangeReconstructionService(ReconstructionServiceInterface):
    """
    Recovers the constant term of a share set by exact Lagrange interpolation
    over the integers. By default the first k shares in stored order are used.
    """
    def __init__(self, session: Session | None = None):
        self.session = session

    def points(self, share_set: ShareSet) -> list[Point]:
        points = []
        for share in share_set.shares:
            try:
                y = decode(share.value, share.base)
            except InvalidDigit as e:
                e.index = share.index
                raise
            points.append(Point(x=share.index, y=y))
        return points

    def reconstruct(self, share_set: ShareSet, indices: Sequence[int] | None = None) -> int:
        points = self.points(share_set)

        if indices is not None:
            by_x = {point.x: point for point in points}
            points = [by_x[i] for i in indices if i in by_x]

        if len(points) < share_set.k:
            raise ThresholdNotMet(required=share_set.k, available=len(points))

        selected = points[:share_set.k]
        logger.debug("Share set %s: using x = %s", share_set.name, [p.x for p in selected])
        return constant_term(selected)

    def process(self, share_set: ShareSet) -> ReconstructOutput:
        """Reconstruct one set, turning data-integrity failures into an output."""
        try:
            secret = self.reconstruct(share_set)
        except ReconstructionError as e:
            logger.warning("Share set %s failed: [%s] %s", share_set.name, e.kind.value, e)
            output = ReconstructOutput(name=share_set.name, error_kind=e.kind, error=str(e))
        else:
            logger.info("Share set %s reconstructed", share_set.name)
            output = ReconstructOutput(name=share_set.name, secret=to_decimal(secret))
            logger.debug("Share set %s secret: %s", share_set.name, output.secret)

        return self._record(share_set, output)

    def process_many(self, share_sets: Iterable[ShareSet]) -> list[ReconstructOutput]:
        return [self.process(share_set) for share_set in share_sets]

    # Helper methods

    def _record(self, share_set: ShareSet, output: ReconstructOutput) -> ReconstructOutput:
        if self.session is None:
            return output

        record = ReconstructionRecord(
            name=share_set.name,
            threshold=share_set.k,
            total_shares=share_set.n,
            secret=output.secret,
            error_kind=output.error_kind.value if output.error_kind else None,
            error=output.error,
        )
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record.to_output()
