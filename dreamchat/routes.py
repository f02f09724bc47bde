"""API route handlers."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from dreamchat.models import ChatRequest, ChatResponse, ErrorResponse, HealthResponse
from dreamchat.services import DreamInterpreter

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong"

router = APIRouter()


def get_interpreter(request: Request) -> DreamInterpreter:
    """Resolve the interpreter created at startup."""
    return request.app.state.interpreter


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={500: {"model": ErrorResponse}},
)
def chat(request: ChatRequest, interpreter: DreamInterpreter = Depends(get_interpreter)):
    """Forward the transcript to the model and return its raw reply."""
    conversation_history = [m.model_dump() for m in request.messages]

    try:
        result = interpreter.generate_response(conversation_history)
    except Exception:
        logger.exception("Error with OpenAI API")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=GENERIC_ERROR).model_dump(),
        )

    return ChatResponse(result=result)


@router.get("/health", response_model=HealthResponse)
def health(interpreter: DreamInterpreter = Depends(get_interpreter)):
    """Report that the relay is up and which model it talks to."""
    return HealthResponse(status="ok", model=interpreter.model)
