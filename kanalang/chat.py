"""
Chat with an LLM in Kana.

User messages are translated English -> Kana before they are sent to an
OpenAI-compatible chat-completions endpoint, and the model's Kana reply is
translated back into English. The conversation history is kept in Kana.
"""
import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Optional

import httpx

from kanalang.translator import Translator

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a helpful assistant that responds in Kanalang, a simple constructed language based on Toki Pona.

GRAMMAR RULES:
- Word order: Subject + li + Verb + e + Object
- "li" separates subject from verb (omit if subject is "mi" or "sina")
- "e" marks the direct object
- "se" at the start makes a question
- "ala" after a word negates it
- "pi" groups modifiers together

CORE VOCABULARY:
Pronouns: mi (I/me), sina (you), ona (he/she/it/they)
Entities: jan (person), tomo (house), ma (land/place), ilo (tool), kala (fish), kasi (plant), telo (water), suno (sun/day), mun (moon), kon (air), seli (fire), lete (cold), moku (food)
Actions: toki (speak), wile (want), sona (know), lukin (see), kute (hear), lape (sleep), pali (do/make), tawa (go), kama (come), jo (have), pana (give), olin (love), ken (can)
Qualities: pona (good), ike (bad), suli (big), lili (small), wawa (strong), mute (many/very), sin (new), pini (done/finished)
Particles: li (subject marker), e (object marker), la (context marker), en (and), anu (or), ala (no/not), kin (also)

EXAMPLES:
- "mi wile e moku" = I want food
- "sina pona" = You are good
- "se sina lon" = Are you here?
- "ona li toki e ijo" = They say something
- "mi wile ala" = I don't want

IMPORTANT: Always respond in Kanalang only. Use simple sentences. If you don't know a word, use [word] brackets."""

DEFAULT_TIMEOUT = 60.0


class ChatError(RuntimeError):
    """The chat endpoint could not be reached or returned an unusable reply."""


@dataclass
class ChatConfig:
    endpoint: str
    model: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT

    @property
    def completions_url(self) -> str:
        return f"{self.endpoint.rstrip('/')}/chat/completions"

    @classmethod
    def from_env(cls, endpoint=None, model=None, api_key=None, timeout=None) -> "ChatConfig":
        """
        Build a config from explicit values, falling back to KANALANG_ENDPOINT,
        KANALANG_MODEL and KANALANG_API_KEY.

        Raises:
            ValueError: If endpoint, model or API key is missing.
        """
        endpoint = endpoint or os.environ.get('KANALANG_ENDPOINT')
        model = model or os.environ.get('KANALANG_MODEL')
        api_key = api_key or os.environ.get('KANALANG_API_KEY')

        missing = [
            name for name, value in
            (("endpoint", endpoint), ("model", model), ("api key", api_key))
            if not value
        ]
        if missing:
            raise ValueError(f"Missing chat setting(s): {', '.join(missing)}")

        return cls(endpoint, model, api_key, timeout if timeout is not None else DEFAULT_TIMEOUT)


@dataclass
class ChatTurn:
    kana_input: str
    kana_response: str
    english_response: str


class KanaChatSession:
    """
    One conversation with a chat-completions endpoint.

    Usage:
        session = KanaChatSession(ChatConfig.from_env())
        turn = session.send("i want food")
        print(turn.english_response)
    """

    def __init__(
        self,
        config: ChatConfig,
        translator: Optional[Translator] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.config = config
        self.translator = translator or Translator()
        self.client = client or httpx.Client(timeout=config.timeout)
        self.messages: List[Dict[str, str]] = []
        self.reset()

    def reset(self):
        """Forget the conversation, keeping only the system prompt."""
        self.messages = [{"role": "system", "content": SYSTEM_PROMPT}]

    def close(self):
        self.client.close()

    def send(self, english_text: str) -> ChatTurn:
        """
        Send one English message and return the model's reply in both languages.

        Raises:
            ChatError: If the request fails or the reply has no message.
        """
        kana_input = self.translator.english_to_kana(english_text)
        self.messages.append({"role": "user", "content": kana_input})

        reply = self._complete()
        kana_response = reply["content"]
        self.messages.append({"role": reply.get("role", "assistant"), "content": kana_response})

        return ChatTurn(
            kana_input=kana_input,
            kana_response=kana_response,
            english_response=self.translator.kana_to_english(kana_response),
        )

    def _complete(self) -> Dict[str, str]:
        payload = {"model": self.config.model, "messages": self.messages}
        headers = {"Authorization": f"Bearer {self.config.api_key}"}

        logger.debug(f"POST {self.config.completions_url} ({len(self.messages)} messages)")
        try:
            r = self.client.post(self.config.completions_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise ChatError(f"Request failed: {e}") from e

        if not r.is_success:
            raise ChatError(f"API error ({r.status_code}): {r.text}")

        try:
            message = r.json()["choices"][0]["message"]
            if not isinstance(message.get("content"), str):
                raise TypeError("message content is not a string")
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            raise ChatError(f"Failed to parse response: {e}") from e

        return message
