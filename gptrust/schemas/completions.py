from typing import Any

from pydantic import BaseModel, Field, StrictInt, model_serializer, model_validator

MAX_STOP_WORDS = 4


class _OneOf(BaseModel):
    """Record of optional variants of which exactly one should be set.

    On the wire the group is written as the bare value of its populated variant,
    so unset variants never appear in the request body.
    """

    model_config = {"frozen": True}

    def populated(self) -> list[str]:
        return [name for name in type(self).model_fields if getattr(self, name) is not None]

    @property
    def value(self) -> Any:
        """Value of the single populated variant, or None when zero or several are set."""
        populated = self.populated()
        if len(populated) != 1:
            return None
        return getattr(self, populated[0])

    @model_serializer(mode="wrap")
    def _to_wire(self, handler) -> Any:
        populated = self.populated()
        if len(populated) == 1:
            return getattr(self, populated[0])
        return handler(self)


class CompletionPrompt(_OneOf):
    prompt_text: str | None = None
    prompt_texts: tuple[str, ...] | None = None
    prompt_list: tuple[StrictInt, ...] | None = None
    prompt_lists: tuple[tuple[StrictInt, ...], ...] | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        """Pick the variant for a bare wire value from its element types.

        An empty array carries no element type and always reads back as
        `prompt_texts`, the array-of-strings form.
        """
        if isinstance(data, str):
            return {"prompt_text": data}
        if isinstance(data, (list, tuple)):
            if any(isinstance(item, bool) for item in data):
                raise ValueError("prompt token ids must be integers, not booleans")
            if data and all(isinstance(item, int) for item in data):
                return {"prompt_list": data}
            if data and all(isinstance(item, (list, tuple)) for item in data):
                return {"prompt_lists": data}
            return {"prompt_texts": data}
        return data

    @classmethod
    def text(cls, prompt: str) -> "CompletionPrompt":
        return cls(prompt_text=prompt)

    @classmethod
    def texts(cls, prompts: list[str]) -> "CompletionPrompt":
        return cls(prompt_texts=prompts)

    @classmethod
    def tokens(cls, token_ids: list[int]) -> "CompletionPrompt":
        return cls(prompt_list=token_ids)

    @classmethod
    def token_lists(cls, token_id_lists: list[list[int]]) -> "CompletionPrompt":
        return cls(prompt_lists=token_id_lists)


class StopWords(_OneOf):
    stop_word: str | None = None
    stop_words: tuple[str, ...] | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"stop_word": data}
        if isinstance(data, (list, tuple)):
            return {"stop_words": data}
        return data

    @classmethod
    def word(cls, stop: str) -> "StopWords":
        return cls(stop_word=stop)

    @classmethod
    def words(cls, stops: list[str]) -> "StopWords":
        return cls(stop_words=stops)


class CreateCompletionRequest(BaseModel):
    model: str
    prompt: CompletionPrompt
    suffix: str | None = None
    max_tokens: int | None = Field(default=None, ge=1)
    temperature: float | None = Field(default=None, ge=0, le=2)
    top_p: float | None = Field(default=None, ge=0, le=1)
    n: int | None = Field(default=None, ge=1)
    stream: bool | None = None
    logprobs: int | None = Field(default=None, ge=0, le=5)
    echo: bool | None = None
    stop: StopWords | None = None
    presence_penalty: float | None = Field(default=None, ge=-2, le=2)
    frequency_penalty: float | None = Field(default=None, ge=-2, le=2)
    best_of: int | None = Field(default=None, ge=1)
    logit_bias: dict[int, float] | None = None
    user: str | None = None

    model_config = {"frozen": True}


class LogProbs(BaseModel):
    tokens: list[str]
    token_logprobs: list[float | None]
    top_logprobs: list[dict[str, float] | None]
    text_offset: list[int]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _one_entry_per_token(self) -> "LogProbs":
        expected = len(self.tokens)
        for name in ("token_logprobs", "top_logprobs", "text_offset"):
            if len(getattr(self, name)) != expected:
                raise ValueError(f"{name} has {len(getattr(self, name))} entries for {expected} tokens")
        return self


class Choice(BaseModel):
    text: str
    index: int
    logprobs: LogProbs | None = None
    finish_reason: str | None = None

    model_config = {"frozen": True}


class Usage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

    model_config = {"frozen": True}


class CreateCompletionResponse(BaseModel):
    id: str
    object: str = "text_completion"
    created: int
    model: str
    choices: list[Choice]
    usage: Usage

    model_config = {"frozen": True}
