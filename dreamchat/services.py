"""LLM integration for dream interpretation."""

import json
import logging

from openai import OpenAI

from dreamchat.config import Settings, load_system_prompt

logger = logging.getLogger(__name__)


def build_openai_client(settings: Settings) -> OpenAI:
    """Create the OpenAI client from explicit settings."""
    return OpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_api_url,
    )


class DreamInterpreter:
    """Forwards a conversation to the model with the interpretation prompt in front."""

    def __init__(self, client: OpenAI, model: str, system_prompt: str):
        self.client = client
        self.model = model
        self.system_prompt = system_prompt

    @classmethod
    def from_settings(cls, settings: Settings) -> "DreamInterpreter":
        return cls(
            client=build_openai_client(settings),
            model=settings.openai_model,
            system_prompt=load_system_prompt(settings.system_prompt_path),
        )

    def build_messages(self, conversation_history: list[dict]) -> list[dict]:
        return [
            {"role": "system", "content": self.system_prompt},
            *conversation_history,
        ]

    def _log_request(self, messages: list[dict]):
        """Log the request being sent to the OpenAI API."""
        request_data = {"model": self.model, "messages": messages[1:]}
        logger.info(">>> REQUEST TO OPENAI API (system prompt omitted):")
        logger.info(json.dumps(request_data, indent=2, ensure_ascii=False))

    def _log_response(self, content: str | None):
        logger.info("<<< RESPONSE FROM OPENAI API:")
        logger.info(content)

    def generate_response(self, conversation_history: list[dict]) -> str:
        """Generate the raw interpretation text for the conversation."""
        messages = self.build_messages(conversation_history)
        self._log_request(messages)

        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
        )

        content = response.choices[0].message.content
        self._log_response(content)
        if content is None:
            raise ValueError("Model returned an empty completion")
        return content
