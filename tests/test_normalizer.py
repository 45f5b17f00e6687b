import pytest

from llm_summarizer_lib.exceptions import ValidationError
from llm_summarizer_lib.data_models.chat import PromptTemplate
from llm_summarizer_lib.data_models.constants import (
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_USER_PROMPT_TEMPLATE,
)
from llm_summarizer_lib.normalizer import RequestNormalizer, normalize_messages


@pytest.mark.parametrize("text", ["hello", "  padded text  ", "a\nb\nc"])
def test_text_is_wrapped_into_system_and_user(text):
    messages = RequestNormalizer().normalize({"text": text})

    assert [m["role"] for m in messages] == ["system", "user"]
    assert messages[0]["content"] == DEFAULT_SYSTEM_PROMPT
    assert messages[1]["content"] == DEFAULT_USER_PROMPT_TEMPLATE.replace(
        "{text}", text
    )


def test_identity_template_keeps_text_verbatim():
    template = PromptTemplate(system_prompt="sys", user_template="{text}")
    messages = normalize_messages({"text": " keep me "}, template=template)

    assert messages == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": " keep me "},
    ]


def test_braces_in_text_are_not_interpreted():
    template = PromptTemplate(user_template="Summarize: {text} {0}")
    messages = normalize_messages({"text": "{name} and {}"}, template=template)

    assert messages[1]["content"] == "Summarize: {name} and {} {0}"


def test_messages_are_passed_through_unchanged():
    conversation = [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "first"},
        {"role": "assistant", "content": "answer"},
        {"role": "user", "content": "second"},
    ]
    result = normalize_messages({"messages": conversation, "text": "ignored"})

    assert result is conversation
    assert [m["content"] for m in result] == ["be brief", "first", "answer", "second"]


def test_empty_messages_fall_back_to_text():
    messages = normalize_messages({"messages": [], "text": "fallback"})

    assert len(messages) == 2
    assert "fallback" in messages[1]["content"]


def test_non_string_text_is_coerced():
    messages = normalize_messages(
        {"text": 12345}, template=PromptTemplate(user_template="{text}")
    )

    assert messages[1]["content"] == "12345"


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"text": ""},
        {"text": "   \n\t "},
        {"text": None},
        {"messages": []},
        {"messages": "not a list"},
        None,
        ["text"],
    ],
)
def test_missing_input_raises_validation_error(body):
    with pytest.raises(ValidationError) as exc:
        normalize_messages(body)

    assert str(exc.value) == "missing text or messages"
