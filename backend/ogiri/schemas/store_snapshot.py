"""Store Snapshot — the single JSON document the durable store rewrites on every mutation.

Invariants:
    - Layout is {themes: {id: Theme}, answers: {id: Answer}, next_theme_id, next_answer_id}
    - Counters start at 1 and only grow
    - null or missing maps load as empty; null, missing, or zero counters load as 1
    - Each counter is above every theme_<n> / answer_<n> key already in its map, so
      the next sequential id never lands on a stored record
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from ogiri.core.id_generator import (
    ANSWER_ID_PREFIX,
    THEME_ID_PREFIX,
    sequence_number,
)
from ogiri.schemas.answer import Answer
from ogiri.schemas.theme import Theme


def _next_free(prefix: str, ids, counter: int) -> int:
    taken = [n for n in (sequence_number(prefix, i) for i in ids) if n is not None]
    return max([counter, *(n + 1 for n in taken)])


class StoreSnapshot(BaseModel):
    """Full durable-store state."""
    themes: dict[str, Theme] = Field(default_factory=dict)
    answers: dict[str, Answer] = Field(default_factory=dict)
    next_theme_id: int = 1
    next_answer_id: int = 1

    @field_validator("themes", "answers", mode="before")
    @classmethod
    def null_map_as_empty(cls, v):
        return {} if v is None else v

    @field_validator("next_theme_id", "next_answer_id", mode="before")
    @classmethod
    def counter_at_least_one(cls, v):
        if v is None:
            return 1
        if isinstance(v, int) and v < 1:
            return 1
        return v

    @model_validator(mode="after")
    def counters_past_stored_ids(self):
        self.next_theme_id = _next_free(
            THEME_ID_PREFIX, self.themes, self.next_theme_id,
        )
        self.next_answer_id = _next_free(
            ANSWER_ID_PREFIX, self.answers, self.next_answer_id,
        )
        return self
