"""Board and idea endpoints (read-only)."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from voyage.api.deps import Services, get_services
from voyage.models.ideas import Board, Idea

router = APIRouter(tags=["ideas"])


@router.get("/boards", response_model=list[Board])
async def list_boards(services: Annotated[Services, Depends(get_services)]) -> list[Board]:
    return services.ideas.boards


@router.get("/boards/{board_id}/ideas", response_model=list[Idea])
async def list_board_ideas(
    board_id: uuid.UUID,
    services: Annotated[Services, Depends(get_services)],
) -> list[Idea]:
    if services.ideas.get_board(board_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    return services.ideas.ideas_for_board(board_id)


@router.get("/ideas", response_model=list[Idea])
async def list_ideas(services: Annotated[Services, Depends(get_services)]) -> list[Idea]:
    """Saved ideas followed by unorganized ones."""
    return services.ideas.ideas + services.ideas.unorganized


@router.get("/ideas/filters")
async def idea_filters(services: Annotated[Services, Depends(get_services)]) -> dict[str, list[str]]:
    return {"tags": services.ideas.all_tags(), "popular": services.ideas.popular_filters()}
