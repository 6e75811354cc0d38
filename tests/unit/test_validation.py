import pytest

from gptrust.core.exceptions import (
    AmbiguousPromptError,
    AmbiguousStopError,
    EmptyModelError,
    RequestValidationError,
    StreamingNotSupportedError,
    TooManyStopWordsError,
)
from gptrust.schemas.completions import CompletionPrompt, StopWords
from gptrust.services.validation import validate
from tests.mocks.factories import make_request

SINGLE_VARIANT_PROMPTS = [
    CompletionPrompt.text("Hello"),
    CompletionPrompt.texts(["Hello", "Hi"]),
    CompletionPrompt.tokens([15496]),
    CompletionPrompt.token_lists([[15496], [17250]]),
]


class TestModel:
    @pytest.mark.parametrize("model", ["", "   "])
    def test_empty_model_rejected(self, model: str):
        with pytest.raises(EmptyModelError):
            validate(make_request(model=model))

    def test_empty_model_checked_before_prompt(self):
        with pytest.raises(EmptyModelError):
            validate(make_request(model="", prompt=CompletionPrompt()))


class TestPrompt:
    @pytest.mark.parametrize("prompt", SINGLE_VARIANT_PROMPTS)
    def test_single_variant_passes(self, prompt: CompletionPrompt):
        validate(make_request(prompt=prompt))

    def test_no_variant_rejected(self):
        with pytest.raises(AmbiguousPromptError):
            validate(make_request(prompt=CompletionPrompt()))

    def test_two_variants_rejected(self):
        with pytest.raises(AmbiguousPromptError) as exc_info:
            validate(make_request(prompt=CompletionPrompt(prompt_text="Hello", prompt_texts=["Hello"])))
        assert exc_info.value.details["populated"] == ["prompt_text", "prompt_texts"]

    def test_all_variants_rejected(self):
        prompt = CompletionPrompt(prompt_text="a", prompt_texts=["b"], prompt_list=[1], prompt_lists=[[2]])
        with pytest.raises(AmbiguousPromptError):
            validate(make_request(prompt=prompt))


class TestStop:
    def test_missing_stop_rejected(self):
        with pytest.raises(AmbiguousStopError) as exc_info:
            validate(make_request(stop=None))
        assert exc_info.value.details["populated"] == []

    @pytest.mark.parametrize("word", ["", ".", "\n\n", "a much longer stop sequence"])
    def test_single_word_always_passes(self, word: str):
        validate(make_request(stop=StopWords.word(word)))

    @pytest.mark.parametrize("count", [1, 2, 3, 4])
    def test_up_to_four_words_pass(self, count: int):
        validate(make_request(stop=StopWords.words([str(i) for i in range(count)])))

    def test_five_words_rejected(self):
        with pytest.raises(TooManyStopWordsError) as exc_info:
            validate(make_request(stop=StopWords.words(["a", "b", "c", "d", "e"])))
        assert exc_info.value.details == {"count": 5, "maximum": 4}
        assert "maximum 4" in exc_info.value.message

    def test_both_variants_rejected(self):
        with pytest.raises(AmbiguousStopError):
            validate(make_request(stop=StopWords(stop_word=".", stop_words=["!"])))

    def test_no_variant_rejected(self):
        with pytest.raises(AmbiguousStopError):
            validate(make_request(stop=StopWords()))


class TestStream:
    def test_streaming_rejected(self):
        with pytest.raises(StreamingNotSupportedError):
            validate(make_request(stream=True))

    def test_stream_false_passes(self):
        validate(make_request(stream=False))


def test_all_failures_share_base_class():
    for request in (
        make_request(model=""),
        make_request(prompt=CompletionPrompt()),
        make_request(stop=StopWords()),
        make_request(stop=StopWords.words(["1", "2", "3", "4", "5"])),
    ):
        with pytest.raises(RequestValidationError):
            validate(request)


def test_scenario_davinci_hello_passes():
    validate(make_request(model="text-davinci-003", prompt=CompletionPrompt.text("Hello"), stop=StopWords.word(".")))
