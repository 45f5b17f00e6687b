"""
Summarization endpoint.

``POST /api/summarize`` accepts either ``{"text": "..."}`` or
``{"messages": [...]}``, forwards the normalised conversation to the
configured Azure OpenAI deployment and answers with the trimmed summary.

The request goes through a linear sequence of steps, each of which may end
the request:

1. configuration check  – 500 when provider settings are missing or invalid,
2. normalisation        – 400 when the body has neither text nor messages,
3. completion           – 500 on any provider or unexpected failure,
4. success              – 200 with the summary and echo metadata.
"""

import logging

from typing import Optional, Dict, Any, Tuple, Callable

from llm_summarizer_lib.config import ProviderConfig
from llm_summarizer_lib.client import AzureChatCompletionClient
from llm_summarizer_lib.normalizer import RequestNormalizer
from llm_summarizer_lib.data_models.chat import PromptTemplate
from llm_summarizer_lib.exceptions import ConfigurationError, ValidationError

from llm_summarizer_api.base.constants import (
    MINIMAL_RESPONSE,
    REST_API_LOG_LEVEL,
    SYSTEM_PROMPT,
    USER_PROMPT_TEMPLATE,
)
from llm_summarizer_api.core.errors import (
    error_as_dict,
    ERROR_MISSING_CONFIGURATION,
    ERROR_SUMMARIZATION_FAILED,
)
from llm_summarizer_api.endpoints.endpoint_i import EndpointI

ClientFactory = Callable[[ProviderConfig, logging.Logger], AzureChatCompletionClient]


class SummarizeEndpoint(EndpointI):
    """
    Handler/responder of the summarization request.

    Parameters
    ----------
    config : Optional[ProviderConfig]
        Provider configuration injected at start‑up.  When ``None`` the
        configuration is read from the environment on every request.
    template : Optional[PromptTemplate]
        Prompts used for bare‑text requests; built from
        ``LLM_SUMMARIZER_SYSTEM_PROMPT`` and
        ``LLM_SUMMARIZER_USER_PROMPT_TEMPLATE`` by default.
    client_factory : Optional[ClientFactory]
        Callable creating the completion client from the configuration.
    minimal_response : Optional[bool]
        Return only ``{"summary": ...}`` on success.
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        template: Optional[PromptTemplate] = None,
        client_factory: Optional[ClientFactory] = None,
        minimal_response: Optional[bool] = None,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        ep_name: str = "summarize",
    ):
        super().__init__(
            ep_name=ep_name,
            method="POST",
            logger_level=logger_level,
            logger_file_name=logger_file_name,
        )
        self._config = config
        self._normalizer = RequestNormalizer(
            template=template
            or PromptTemplate(
                system_prompt=SYSTEM_PROMPT, user_template=USER_PROMPT_TEMPLATE
            )
        )
        self._client_factory = client_factory or AzureChatCompletionClient
        self._minimal_response = (
            MINIMAL_RESPONSE if minimal_response is None else minimal_response
        )

    def run_ep(self, params: Optional[Dict[str, Any]]) -> Tuple[Dict[str, Any], int]:
        """
        Map one inbound request body to exactly one response.

        Parameters
        ----------
        params : Optional[Dict[str, Any]]
            Parsed JSON body of the request.

        Returns
        -------
        Tuple[dict, int]
            Response body and HTTP status code (200, 400 or 500).
        """
        try:
            config = self._config or ProviderConfig.from_env()
        except ConfigurationError as exc:
            self.logger.error(
                f"summarize configuration error: missing={exc.missing} "
                f"invalid={exc.invalid}"
            )
            return self.return_response_not_ok(
                error_as_dict(error=str(exc) or ERROR_MISSING_CONFIGURATION),
                status_code=500,
            )

        try:
            messages = self._normalizer.normalize(params)
        except ValidationError as exc:
            return self.return_response_not_ok(
                error_as_dict(error=str(exc)), status_code=400
            )

        try:
            client = self._client_factory(config, self.logger)
            result = client.complete(messages)
        except Exception as exc:
            self.logger.error(f"summarize error: {exc}")
            return self.return_response_not_ok(
                error_as_dict(error=ERROR_SUMMARIZATION_FAILED, detail=str(exc)),
                status_code=500,
            )

        return self.return_response_ok(
            result.as_response(minimal=self._minimal_response)
        )
