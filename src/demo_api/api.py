import secrets
from typing import Tuple

from fastapi import FastAPI, APIRouter, HTTPException
import structlog

from . import models
from .riddles import DEFAULT_CHAIN, RiddleSpec, lookup, riddle_path

log = structlog.get_logger(
    processors=[
        structlog.processors.JSONRenderer(indent=2),
    ],
)


def build_riddle_response(index: int, spec: RiddleSpec) -> models.RiddleResponse:
    """ Build the riddle payload, leaving the key out of unknown-key riddles. """
    return models.RiddleResponse(
        message=f"Riddle {index + 1}: decode the text and POST the answer to this path.",
        riddlePath=riddle_path(index),
        exampleResponse=models.AnswerRequest(answer="the decoded text"),
        riddleType=spec.riddle_type,
        riddleText=spec.ciphertext(),
        riddleKey=spec.public_key(),
    )


def create_app(chain: Tuple[RiddleSpec, ...] = DEFAULT_CHAIN) -> FastAPI:
    """Build the demo app around the given riddle chain."""
    if not chain:
        raise ValueError("The riddle chain needs at least one riddle")

    app = FastAPI(title="Riddle Demo API")
    router = APIRouter()

    def get_spec(index: int) -> RiddleSpec:
        spec = lookup(chain, index)
        if spec is None:
            raise HTTPException(status_code=404, detail=f"No riddle {index}")
        return spec

    @router.post("/start", response_model=models.StartResponse)
    def start(req: models.StartRequest):
        """ Log in and receive the path of the first riddle. """
        log.info("login", login=req.login)
        return models.StartResponse(
            message=f"Welcome {req.login}, {len(chain)} riddles await.",
            riddlePath=riddle_path(0),
        )

    @router.get("/riddles/{index}", response_model=models.RiddleResponse, response_model_exclude_none=True)
    def get_riddle(index: int):
        """ Fetch one riddle. """
        spec = get_spec(index)
        log.info("riddle served", index=index, riddle_type=spec.riddle_type, key_revealed=spec.public_key() is not None)
        return build_riddle_response(index, spec)

    @router.post("/riddles/{index}", response_model=models.AnswerResponse, response_model_exclude_none=True)
    def answer_riddle(index: int, req: models.AnswerRequest):
        """ Check an answer. The last riddle hands out a certificate instead of a next path. """
        spec = get_spec(index)
        if req.answer != spec.plaintext:
            log.warning("wrong answer", index=index, answer=req.answer)
            raise HTTPException(status_code=400, detail="That answer is not correct.")

        if index + 1 < len(chain):
            log.info("correct answer", index=index)
            return models.AnswerResponse(
                result="correct",
                message="Correct! On to the next riddle.",
                nextRiddlePath=riddle_path(index + 1),
            )

        certificate = f"/riddlebot/certificates/{secrets.token_hex(8)}"
        log.info("chain complete", certificate=certificate)
        return models.AnswerResponse(
            result="correct",
            message="You solved every riddle.",
            certificate=certificate,
        )

    # Include the router in the app (after all routes are defined)
    app.include_router(router, prefix="/riddlebot")
    return app


app = create_app()
