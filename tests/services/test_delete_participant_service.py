from typing import Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from contest.exceptions import NotFoundError
from contest.models.api.participants import RegisterParticipantRequest
from contest.repositories.participant_repository import ParticipantRepository
from contest.services.delete_participant_service import DeleteParticipantService
from contest.services.export_participants_service import ExportParticipantsService
from contest.services.list_participants_service import ListParticipantsService

MakeRegistration = Callable[..., RegisterParticipantRequest]


class TestDeleteParticipantService:
    """Tests for DeleteParticipantService."""

    @pytest.mark.asyncio
    async def test_delete_removes_participant_everywhere(
        self, test_db: AsyncSession, make_registration: MakeRegistration
    ) -> None:
        repo = ParticipantRepository(test_db)
        alice = await repo.add_participant(make_registration())
        bob = await repo.add_participant(make_registration(name="Bob", email="b@x.com"))
        await repo.raise_score(alice.id, 70)
        await repo.raise_score(bob.id, 65)

        deleted = await DeleteParticipantService(test_db).delete_participant(alice.id)

        assert deleted.id == alice.id
        assert deleted.score == 70
        listing = ListParticipantsService(test_db)
        assert [p.id for p in await listing.list_participants()] == [bob.id]
        assert [e.id for e in await listing.get_leaderboard()] == [bob.id]
        export = await ExportParticipantsService(test_db).export_participants()
        assert [p.id for p in export] == [bob.id]

    @pytest.mark.asyncio
    async def test_second_delete_is_not_found(
        self, test_db: AsyncSession, make_registration: MakeRegistration
    ) -> None:
        participant = await ParticipantRepository(test_db).add_participant(
            make_registration()
        )
        service = DeleteParticipantService(test_db)
        await service.delete_participant(participant.id)

        with pytest.raises(NotFoundError):
            await service.delete_participant(participant.id)
