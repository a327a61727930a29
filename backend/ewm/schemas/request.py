"""Participation Request Schemas."""

from ewm.core.domain_types import RequestStatus
from ewm.schemas.common import CamelModel, EwmDateTime


class ParticipationRequestDto(CamelModel):
    id: int
    created: EwmDateTime
    event: int
    requester: int
    status: RequestStatus
    group: str
