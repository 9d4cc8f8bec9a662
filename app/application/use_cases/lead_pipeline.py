"""Lead pipeline board use case."""

from typing import Any, Callable, Optional

from app.application.dtos.lead import LeadSummary
from app.application.dtos.pipeline import (
    MoveCardRequest,
    MoveCardResult,
    PipelineBoard,
    PipelineCard,
    PipelineColumn,
)
from app.application.dtos.session import SessionContext
from app.application.errors import CRMError, NotFoundError
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.status_history_repository import StatusHistoryRepository
from app.application.use_cases.lead_summaries import load_lead_summaries
from app.application.use_cases.track_lead_status import TrackLeadStatus
from app.domain.value_objects.pipeline_stage import DEFAULT_STAGE, PipelineStage
from app.domain.value_objects.role import EDITOR_ROLES


def build_board(summaries: list[LeadSummary]) -> PipelineBoard:
    """
    Group lead summaries into stage columns.

    Columns follow the stage order with rejected last. Cards inside a
    column are newest first. A status outside the known stages lands in
    the new_contact column.

    Args:
        summaries: Lead summaries with their current status

    Returns:
        Pipeline board
    """
    cards: dict[PipelineStage, list[PipelineCard]] = {s: [] for s in PipelineStage.ordered()}

    for summary in sorted(summaries, key=lambda s: s.created_at, reverse=True):
        stage = PipelineStage.parse(summary.status) or DEFAULT_STAGE
        cards[stage].append(PipelineCard.from_summary(summary))

    return PipelineBoard(
        columns=[
            PipelineColumn(stage=stage, label=stage.label, cards=cards[stage])
            for stage in PipelineStage.ordered()
        ]
    )


class MoveCardCommand:
    """Move of one card between columns of a board snapshot."""

    def __init__(self, board: PipelineBoard, request: MoveCardRequest) -> None:
        self.board = board
        self.request = request
        self.source = board.stage_of(request.lead_id)

    @property
    def is_noop(self) -> bool:
        """Dropping a card on its own column changes nothing."""
        return self.source == self.request.destination

    def apply(self) -> PipelineBoard:
        """
        Build the board as it looks after the move.

        The snapshot itself is left untouched; the card goes on top of
        the destination column.

        Returns:
            Speculative board
        """
        moved: Optional[PipelineCard] = None
        columns = []
        for column in self.board.columns:
            kept = []
            for card in column.cards:
                if card.lead_id == self.request.lead_id:
                    moved = card
                else:
                    kept.append(card)
            columns.append(column.model_copy(update={"cards": kept}))

        if moved is None:
            raise NotFoundError(f"Candidato {self.request.lead_id} no está en el tablero")

        columns = [
            column.model_copy(update={"cards": [moved] + column.cards})
            if column.stage == self.request.destination
            else column
            for column in columns
        ]
        return PipelineBoard(columns=columns)


class LeadPipeline:
    """Use case for the Kanban board and card moves."""

    def __init__(
        self,
        lead_repository: LeadRepository,
        status_history_repository: StatusHistoryRepository,
        track_lead_status: TrackLeadStatus,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize lead pipeline use case.

        Args:
            lead_repository: Repository for leads and details
            status_history_repository: Repository for the status log
            track_lead_status: Use case that appends status entries
            logger: Optional event logger (component, action, **fields)
        """
        self._lead_repository = lead_repository
        self._status_history_repository = status_history_repository
        self._track_lead_status = track_lead_status
        self._logger = logger

    def _log(self, action: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger("pipeline", action, **kwargs)

    async def board(self, session: SessionContext) -> PipelineBoard:
        """
        Build the board from persisted data.

        Args:
            session: Caller context

        Returns:
            Pipeline board
        """
        summaries = await load_lead_summaries(
            self._lead_repository, self._status_history_repository
        )
        return build_board(summaries)

    async def move_card(
        self,
        session: SessionContext,
        request: MoveCardRequest,
        board: Optional[PipelineBoard] = None,
    ) -> MoveCardResult:
        """
        Move a lead card to another stage.

        The move is applied to a copy of the board first and confirmed by
        appending a status entry. If the append fails, the board is
        rebuilt from persisted data and returned with the error.

        Args:
            session: Caller context
            request: Card and destination stage
            board: Board snapshot the client is showing (rebuilt when omitted)

        Returns:
            Move result with the board to display

        Raises:
            PermissionDeniedError: If the caller cannot move cards
            NotFoundError: If the lead is not on the board
        """
        session.require(EDITOR_ROLES)

        if board is None or board.stage_of(request.lead_id) is None:
            board = await self.board(session)

        command = MoveCardCommand(board, request)
        if command.source is None:
            raise NotFoundError(f"Candidato {request.lead_id} no encontrado")

        if command.is_noop:
            return MoveCardResult(
                success=True,
                lead_id=request.lead_id,
                source=command.source,
                destination=request.destination,
                board=board,
            )

        speculative = command.apply()
        try:
            await self._track_lead_status.append_status(
                session, request.lead_id, request.destination, request.notes
            )
        except CRMError as e:
            self._log(
                "card_move_failed",
                actor_id=session.user_id,
                lead_id=request.lead_id,
                source=command.source.value,
                destination=request.destination.value,
                error=e.message,
            )
            return MoveCardResult(
                success=False,
                lead_id=request.lead_id,
                source=command.source,
                destination=request.destination,
                board=await self.board(session),
                refetched=True,
                error=e.message,
            )

        return MoveCardResult(
            success=True,
            lead_id=request.lead_id,
            source=command.source,
            destination=request.destination,
            board=speculative,
        )
