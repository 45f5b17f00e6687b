"""
Normalisation of inbound summarization requests.

Clients send either a ready conversation (``{"messages": [...]}``) or a
single text (``{"text": "..."}``).  :class:`RequestNormalizer` turns both
shapes into the ordered list of chat messages sent to the provider.
"""

from typing import Any, Dict, List, Optional

from llm_summarizer_lib.exceptions import ValidationError
from llm_summarizer_lib.data_models.chat import ChatMessage, PromptTemplate
from llm_summarizer_lib.data_models.constants import (
    MESSAGES_PARAM,
    TEXT_PARAM,
    ROLE_SYSTEM,
    ROLE_USER,
)

MISSING_INPUT_MESSAGE = "missing text or messages"


class RequestNormalizer:
    """
    Convert a parsed request body into a canonical message sequence.

    Parameters
    ----------
    template : PromptTemplate, optional
        Prompts used in the text path.  The library defaults are used when
        omitted.
    """

    def __init__(self, template: Optional[PromptTemplate] = None):
        self.template = template or PromptTemplate()

    def normalize(self, body: Any) -> List[Dict[str, Any]]:
        """
        Produce the ordered message list for *body*.

        A non‑empty ``messages`` list is returned unchanged.  Otherwise the
        ``text`` field is wrapped into a system/user pair using the template.

        Parameters
        ----------
        body : Any
            Parsed JSON body; anything that is not a mapping is treated as
            an empty body.

        Returns
        -------
        List[Dict[str, Any]]
            Messages in turn order.

        Raises
        ------
        ValidationError
            If neither a non‑empty ``messages`` list nor a non‑blank ``text``
            is present.
        """
        if not isinstance(body, dict):
            body = {}

        messages = body.get(MESSAGES_PARAM)
        if isinstance(messages, list) and len(messages):
            return messages

        raw_text = body.get(TEXT_PARAM)
        text = str(raw_text) if raw_text else ""
        if not text.strip():
            raise ValidationError(MISSING_INPUT_MESSAGE)

        return [
            ChatMessage(
                role=ROLE_SYSTEM, content=self.template.system_prompt
            ).model_dump(),
            ChatMessage(
                role=ROLE_USER, content=self.template.render_user_prompt(text)
            ).model_dump(),
        ]


def normalize_messages(
    body: Any, template: Optional[PromptTemplate] = None
) -> List[Dict[str, Any]]:
    return RequestNormalizer(template=template).normalize(body)
