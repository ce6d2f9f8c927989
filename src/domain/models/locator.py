"""Locator strategies for finding an interactive element on a page."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"


class LocatorKind(str, Enum):
    """Strategy families."""

    ATTRIBUTE = "attribute"
    TEXT = "text"


class AttemptOutcome(str, Enum):
    ACTIVATED = "activated"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class LocatorStrategy:
    """
    One way of finding the target element.

    ATTRIBUTE strategies carry a CSS selector in ``expression``. TEXT
    strategies match ``expression`` case-insensitively against the text of a
    ``tag`` element, or against its ``aria-label`` when ``match_label`` is set;
    they survive class-name churn on the target site.
    """

    kind: LocatorKind
    expression: str
    tag: str = "*"
    match_label: bool = False

    @classmethod
    def css(cls, selector: str) -> "LocatorStrategy":
        return cls(kind=LocatorKind.ATTRIBUTE, expression=selector)

    @classmethod
    def text(cls, tag: str, needle: str, *, match_label: bool = False) -> "LocatorStrategy":
        return cls(
            kind=LocatorKind.TEXT,
            expression=needle.lower(),
            tag=tag,
            match_label=match_label,
        )

    @property
    def selector(self) -> str:
        """Selector string understood by the browser session."""
        if self.kind is LocatorKind.ATTRIBUTE:
            return self.expression

        source = "@aria-label" if self.match_label else "."
        needle = self.expression.replace("'", "")
        return (
            f"xpath=//{self.tag}[contains(translate({source}, '{_UPPER}', '{_LOWER}'), "
            f"'{needle}')]"
        )

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.selector}"


@dataclass(frozen=True)
class LocatorAttempt:
    """Outcome of trying one strategy."""

    strategy: LocatorStrategy
    outcome: AttemptOutcome
    detail: Optional[str] = None


@dataclass(frozen=True)
class ActivationResult:
    """Result of running a strategy sequence."""

    attempts: tuple[LocatorAttempt, ...] = field(default_factory=tuple)

    @property
    def activated(self) -> bool:
        return bool(self.attempts) and self.attempts[-1].outcome is AttemptOutcome.ACTIVATED

    @property
    def winner(self) -> Optional[LocatorStrategy]:
        return self.attempts[-1].strategy if self.activated else None


# Button/link on a search result that leads to the problem page, most specific first.
PROBLEM_LINK_STRATEGY: tuple[LocatorStrategy, ...] = (
    LocatorStrategy.css("button.ResultArticle_articleContainer__headerLink--problem__jb1Dv"),
    LocatorStrategy.css('button[class*="headerLink"][class*="problem"]'),
    LocatorStrategy.css('a[class*="headerLink"][class*="problem"]'),
    LocatorStrategy.css('a[aria-label*="Problem" i]'),
    LocatorStrategy.css('button[aria-label*="Problem" i]'),
    LocatorStrategy.text("button", "problem"),
    LocatorStrategy.text("a", "problem"),
    LocatorStrategy.text("a", "problem", match_label=True),
    LocatorStrategy.text("button", "problem", match_label=True),
)
