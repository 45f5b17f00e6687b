"""
Data‑model definitions for the summarization flow.

These pydantic classes describe the messages exchanged with the completion
provider, the prompt template used when a client sends bare text, and the
result returned to the client.
"""

from typing import Literal, Dict, Any

from pydantic import BaseModel, ConfigDict, Field

from llm_summarizer_lib.data_models.constants import (
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_USER_PROMPT_TEMPLATE,
    TEXT_PLACEHOLDER,
)


class ChatMessage(BaseModel):
    """
    Single conversation turn in the OpenAI chat format.

    Attributes
    ----------
    role : Literal["system", "user", "assistant"]
        Owner of the turn.
    content : str
        Text of the turn.
    """

    role: Literal["system", "user", "assistant"]
    content: str


class PromptTemplate(BaseModel):
    """
    Prompts used to wrap a bare ``text`` request into a conversation.

    Attributes
    ----------
    system_prompt : str
        Instruction placed in the leading ``system`` message.
    user_template : str
        Template of the ``user`` message; every ``{text}`` occurrence is
        replaced with the client text.
    """

    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    user_template: str = DEFAULT_USER_PROMPT_TEMPLATE

    def render_user_prompt(self, text: str) -> str:
        # Literal replacement, braces in text or template are never interpreted
        return self.user_template.replace(TEXT_PLACEHOLDER, text)


class CompletionResult(BaseModel):
    """
    Outcome of a single completion call.

    ``system_prompt``, ``user_prompt`` and ``conversation_length`` are echoed
    back for client‑side display only.  They are serialised with camelCase
    aliases (``systemPrompt``, ``userPrompt``, ``conversationLength``).
    """

    model_config = ConfigDict(populate_by_name=True)

    summary: str = ""
    system_prompt: str = Field(default="", alias="systemPrompt")
    user_prompt: str = Field(default="", alias="userPrompt")
    conversation_length: int = Field(default=0, alias="conversationLength")

    def as_response(self, minimal: bool = False) -> Dict[str, Any]:
        if minimal:
            return {"summary": self.summary}
        return self.model_dump(by_alias=True)
