"""The confirmation loop.

A session renders the prompt once, then repeatedly reads and classifies
responses until one of them decides the outcome or the ask budget runs out.
An exhausted budget is an implicit "no", never an error. Terminal failures
(`TerminalIOError`) propagate immediately and are not retried.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterator, Optional

from confirm_cli.classify import classify
from confirm_cli.logging import get_logger
from confirm_cli.readers import InputReader, make_reader
from confirm_cli.render import render_prompt
from confirm_cli.schemas import Answer, ConfirmOptions, Decision, ShortCircuit, Verdict

logger = get_logger(__name__)

_DEFAULT_DECISIONS = {
    Answer.YES: Decision.CONFIRMED,
    Answer.NO: Decision.DENIED,
    Answer.RETRY: None,
}


@dataclass(frozen=True)
class Attempt:
    number: int
    raw: str
    verdict: Verdict


def resolve_verdict(verdict: Verdict, default: Answer) -> Optional[Decision]:
    """Decision for one verdict, or None when the user must be asked again."""
    if verdict is Verdict.AFFIRMATIVE:
        return Decision.CONFIRMED
    if verdict is Verdict.NEGATIVE:
        return Decision.DENIED
    if verdict is Verdict.EMPTY:
        return _DEFAULT_DECISIONS[default]
    return None


class ConfirmSession:
    """One confirmation run over a validated `ConfirmOptions`."""

    def __init__(self, options: ConfirmOptions, reader: Optional[InputReader] = None):
        self.options = options
        self._reader = reader
        self.attempts: list[Attempt] = []
        self.decision: Optional[Decision] = None
        self.exhausted = False

    @property
    def reader(self) -> InputReader:
        if self._reader is None:
            self._reader = make_reader(self.options)
        return self._reader

    def run(self) -> Decision:
        if self.decision is not None:
            return self.decision

        forced = _short_circuit(self.options.short_circuit)
        if forced is not None:
            logger.debug("short_circuit", decision=forced.value)
            self.decision = forced
            return forced

        opts = self.options
        prompt = render_prompt(opts.prompt_text, opts.default_answer, full_words=opts.full_words)
        for number in self._attempt_numbers():
            raw = self.reader.read(prompt)
            verdict = classify(raw, full_words=opts.full_words)
            self.attempts.append(Attempt(number=number, raw=raw, verdict=verdict))
            logger.debug("attempt", number=number, verdict=verdict.value)

            decision = resolve_verdict(verdict, opts.default_answer)
            if decision is not None:
                logger.debug("decided", decision=decision.value, attempts=number)
                self.decision = decision
                return decision

        logger.debug("ask_budget_exhausted", ask_count=opts.ask_count)
        self.exhausted = True
        self.decision = Decision.DENIED
        return self.decision

    def _attempt_numbers(self) -> Iterator[int]:
        if self.options.unlimited:
            return itertools.count(1)
        return iter(range(1, self.options.ask_count + 1))


def confirm(options: ConfirmOptions, reader: Optional[InputReader] = None) -> Decision:
    """Run a single confirmation session and return its decision."""
    return ConfirmSession(options, reader).run()


def _short_circuit(flag: ShortCircuit) -> Optional[Decision]:
    if flag is ShortCircuit.YES:
        return Decision.CONFIRMED
    if flag is ShortCircuit.NO:
        return Decision.DENIED
    return None
