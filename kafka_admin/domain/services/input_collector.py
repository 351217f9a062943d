"""Sequential, cancellable collection of validated user input."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from kafka_admin.domain.ports import Presenter, Validator

POSITIVE_NUMBER_ERROR = "Must be a positive number"

_INTEGER = re.compile(r"([+-]?)([0-9]+)")


@dataclass(frozen=True)
class PromptSpec:
    placeholder: str
    validate: Validator | None = None


def validate_positive_number(value: Optional[str]) -> Optional[str]:
    """Return an error unless *value* is a base-10 integer >= 1."""
    match = _INTEGER.fullmatch(value.strip()) if value else None
    # decided on the digits, int() refuses very long strings
    if match is None or match.group(1) == "-" or not match.group(2).strip("0"):
        return POSITIVE_NUMBER_ERROR
    return None


async def collect_inputs(presenter: Presenter, prompts: Sequence[PromptSpec]) -> List[str] | None:
    """Run *prompts* in order; any cancelled prompt discards all answers."""
    answers: List[str] = []
    for spec in prompts:
        answer = await presenter.prompt(spec.placeholder, spec.validate)
        if not answer:
            return None
        answers.append(answer)
    return answers
