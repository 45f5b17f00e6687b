"""
Completion client for Azure OpenAI chat deployments.

The client converts an ordered message list into the provider request,
performs the call and converts the provider JSON back into a
:class:`CompletionResult`.  Missing fields in the provider answer never raise;
they fall back to explicit defaults.
"""

import logging

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from llm_summarizer_lib.config import ProviderConfig
from llm_summarizer_lib.exceptions import UpstreamError
from llm_summarizer_lib.utils.http import AzureOpenAIRequester
from llm_summarizer_lib.data_models.chat import CompletionResult
from llm_summarizer_lib.data_models.constants import (
    ROLE_SYSTEM,
    ROLE_USER,
    UPSTREAM_FALLBACK_ERROR,
)


class AzureChatCompletionClient:
    """
    Single‑shot client of the ``chat/completions`` endpoint of a deployment.

    Parameters
    ----------
    config : ProviderConfig
        Endpoint, key, deployment, api version and generation settings.
    logger : Optional[logging.Logger]
        Logger used for debug output; a module logger by default.
    """

    def __init__(
        self, config: ProviderConfig, logger: Optional[logging.Logger] = None
    ) -> None:
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.http = AzureOpenAIRequester(
            base_url=config.endpoint,
            api_key=config.api_key,
            timeout=config.timeout,
            logger=self.logger,
        )

    # ------------------------------------------------------------------ #
    def build_path(self) -> str:
        deployment = quote(self.config.deployment, safe="")
        api_version = quote(self.config.api_version, safe="")
        return (
            f"/openai/deployments/{deployment}"
            f"/chat/completions?api-version={api_version}"
        )

    def build_url(self) -> str:
        """
        Return the absolute URL of the deployment's chat completions endpoint.

        Both the deployment identifier and the api version are
        percent‑encoded, and trailing slashes of the endpoint are dropped.
        """
        return self.http.full_url(self.build_path())

    def build_payload(self, messages: List[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            "messages": messages,
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
        }

    # ------------------------------------------------------------------ #
    def complete(self, messages: List[Dict[str, Any]]) -> CompletionResult:
        """
        Send *messages* to the provider and return the trimmed completion.

        Parameters
        ----------
        messages : List[Dict[str, Any]]
            Conversation in turn order, sent exactly as given.

        Returns
        -------
        CompletionResult
            Trimmed summary plus echo metadata (first system prompt, last
            user prompt and the number of messages sent).

        Raises
        ------
        UpstreamError
            If the provider answers with a non‑2xx status.
        ValueError
            If the provider body is not valid JSON.
        requests.RequestException
            On network failures.
        """
        resp = self.http.post(self.build_path(), json=self.build_payload(messages))
        data = resp.json()

        if not 200 <= resp.status_code < 300:
            raise UpstreamError(
                status=resp.status_code,
                message=self._error_message(data),
                raw_body=data,
            )

        return CompletionResult(
            summary=self._first_choice_content(data).strip(),
            system_prompt=self._first_content_with_role(messages, ROLE_SYSTEM),
            user_prompt=self._first_content_with_role(
                list(reversed(messages)), ROLE_USER
            ),
            conversation_length=len(messages),
        )

    # ------------------------------------------------------------------ #
    @staticmethod
    def _error_message(data: Any) -> str:
        error = data.get("error") if isinstance(data, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        if isinstance(message, str) and message:
            return message
        return UPSTREAM_FALLBACK_ERROR

    @staticmethod
    def _first_choice_content(data: Any) -> str:
        """
        Navigate ``choices[0].message.content``; ``""`` when any level is absent.
        """
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not len(choices):
            return ""
        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        return content if isinstance(content, str) else ""

    @staticmethod
    def _first_content_with_role(messages: List[Any], role: str) -> str:
        for m in messages:
            if isinstance(m, dict) and m.get("role") == role:
                content = m.get("content")
                return content if isinstance(content, str) else ""
        return ""
