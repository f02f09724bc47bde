"""Dream Interpreter relay API application."""

import logging

from fastapi import FastAPI

from dreamchat.config import Settings
from dreamchat.routes import router
from dreamchat.services import DreamInterpreter

logging.basicConfig(level=logging.INFO)

app = FastAPI(
    title="Dream Interpreter API",
    description="Relay between the dream chat client and the language model",
    version="0.1.0",
)

app.include_router(router, prefix="/api")


@app.on_event("startup")
def startup():
    """Build the interpreter from the environment."""
    app.state.interpreter = DreamInterpreter.from_settings(Settings.from_env())
