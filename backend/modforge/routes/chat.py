from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status

from modforge.dependencies import (
    ChatServiceDep,
    FileManagerDep,
    GenerationGatewayDep,
    OwnedProject,
)
from modforge.models.api import (
    ChatApplyRequest,
    ChatMessagesResponse,
    ChatSendRequest,
    ChatSendResponse,
)
from modforge.models.file_record import FileRecord
from modforge.tools.path_utils import join_path

from .files import raise_for_file_error

router = APIRouter(prefix="/projects/{project_id}/chat", tags=["chat"])


@router.get("", response_model=ChatMessagesResponse)
async def list_chat_messages(project: OwnedProject, chat: ChatServiceDep) -> ChatMessagesResponse:
    return ChatMessagesResponse(project_id=project.id, messages=chat.list_messages(project.id))


@router.post("", response_model=ChatSendResponse)
async def send_chat_message(
    payload: ChatSendRequest,
    project: OwnedProject,
    chat: ChatServiceDep,
    gateway: GenerationGatewayDep,
) -> ChatSendResponse:
    prompt = payload.prompt.strip()
    if not prompt:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message content cannot be empty",
        )

    turn = await chat.send(
        project.id,
        prompt,
        gateway,
        current_file=payload.current_file,
        project_context=project.describe(),
    )
    return ChatSendResponse(
        project_id=project.id,
        user_message=turn.user_message,
        ai_message=turn.ai_message,
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_chat_history(project: OwnedProject, chat: ChatServiceDep) -> Response:
    await chat.clear(project.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{message_id}/apply",
    response_model=FileRecord,
    status_code=status.HTTP_201_CREATED,
)
async def apply_generated_code(
    message_id: str,
    payload: ChatApplyRequest,
    project: OwnedProject,
    chat: ChatServiceDep,
    manager: FileManagerDep,
) -> FileRecord:
    """Add a message's generated code to the project as a new file."""
    message = chat.get_message(project.id, message_id)
    if message is None or message.generated_code is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No generated code for message '{message_id}'",
        )

    generated = message.generated_code
    record = await manager.create_file(
        generated.filename,
        join_path(payload.parent_path, generated.filename),
        content=generated.code,
        file_type=generated.file_type,
        parent_path=payload.parent_path,
    )
    if record is None:
        raise_for_file_error(manager, "Failed to add file to project")
    return record
