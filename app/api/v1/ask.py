import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from app.schemas.ask import AskRequest, AskResponse
from app.services.answering import ERROR_ANSWER, answer_question

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=AskResponse)
async def ask(request: Request):
    """Answer a question about the current lesson. Always responds 200."""
    try:
        data = AskRequest.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning("Rejected /ask body: %s", e.errors(include_url=False))
        return AskResponse(answer=ERROR_ANSWER)

    answer = await run_in_threadpool(
        answer_question, data.question, topic=data.topic, video_id=data.video_id
    )
    return AskResponse(answer=answer.text)
