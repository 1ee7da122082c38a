"""Football market vocabulary: sides, periods, handicaps, offer types and outcomes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple


def _check_count(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{what} must be a non-negative integer, got {value!r}")


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class Side(enum.Enum):
    """The team a player or an outcome refers to."""

    HOME = "Home"
    AWAY = "Away"

    def __str__(self) -> str:
        return self.value


class Period(enum.Enum):
    """The part of the match an offer is settled on."""

    FIRST_HALF = "FirstHalf"
    SECOND_HALF = "SecondHalf"
    FULL_TIME = "FullTime"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Player:
    """Either a named player on one side, or any other player."""

    side: Optional[Side] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.side is None) != (self.name is None):
            raise ValueError("a named player needs both a side and a name")

    @classmethod
    def named(cls, side: Side, name: str) -> "Player":
        return cls(side, name)

    @classmethod
    def other(cls) -> "Player":
        return cls()

    @property
    def is_other(self) -> bool:
        return self.side is None

    def __str__(self) -> str:
        if self.is_other:
            return "Other"
        return f"Named({self.side}, {_quote(self.name)})"


@dataclass(frozen=True)
class Score:
    """Goals scored by each side."""

    home: int
    away: int

    def __post_init__(self) -> None:
        _check_count(self.home, "home goals")
        _check_count(self.away, "away goals")

    @classmethod
    def nil_all(cls) -> "Score":
        return cls(0, 0)

    def total(self) -> int:
        return self.home + self.away

    def __str__(self) -> str:
        return f"Score {{ home: {self.home}, away: {self.away} }}"


@dataclass(frozen=True)
class Over:
    """A goal line: more than ``goals`` goals."""

    goals: int

    def __post_init__(self) -> None:
        _check_count(self.goals, "goal line")

    def __str__(self) -> str:
        return f"Over({self.goals})"


class WinHandicapKind(enum.Enum):
    AHEAD_OVER = "AheadOver"
    BEHIND_UNDER = "BehindUnder"


@dataclass(frozen=True)
class WinHandicap:
    """A handicap applied to a win outcome."""

    kind: WinHandicapKind
    by: int

    def __post_init__(self) -> None:
        _check_count(self.by, "handicap")

    @classmethod
    def ahead_over(cls, by: int) -> "WinHandicap":
        return cls(WinHandicapKind.AHEAD_OVER, by)

    @classmethod
    def behind_under(cls, by: int) -> "WinHandicap":
        return cls(WinHandicapKind.BEHIND_UNDER, by)

    def flip_asian(self) -> "WinHandicap":
        """The opposing side's handicap in a two-way (Asian) market."""
        if self.kind is WinHandicapKind.AHEAD_OVER:
            return WinHandicap.behind_under(self.by + 1)
        if self.by == 0:
            raise ValueError("BehindUnder(0) has no Asian counterpart")
        return WinHandicap.ahead_over(self.by - 1)

    def flip_european(self) -> "WinHandicap":
        """The opposing side's handicap in a three-way (European) market."""
        if self.kind is WinHandicapKind.AHEAD_OVER:
            return WinHandicap.behind_under(self.by)
        return WinHandicap.ahead_over(self.by)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.by})"


class DrawHandicapKind(enum.Enum):
    AHEAD = "Ahead"
    BEHIND = "Behind"


@dataclass(frozen=True)
class DrawHandicap:
    """A handicap applied to a draw outcome."""

    kind: DrawHandicapKind
    by: int

    def __post_init__(self) -> None:
        _check_count(self.by, "handicap")

    @classmethod
    def ahead(cls, by: int) -> "DrawHandicap":
        return cls(DrawHandicapKind.AHEAD, by)

    @classmethod
    def behind(cls, by: int) -> "DrawHandicap":
        return cls(DrawHandicapKind.BEHIND, by)

    def to_win_handicap(self) -> WinHandicap:
        if self.kind is DrawHandicapKind.AHEAD:
            return WinHandicap.ahead_over(self.by)
        return WinHandicap.behind_under(self.by)

    def flip(self) -> "DrawHandicap":
        """The same handicap seen from the other side; a zero handicap is written as Ahead(0)."""
        if self.by == 0:
            return DrawHandicap.ahead(0)
        if self.kind is DrawHandicapKind.AHEAD:
            return DrawHandicap.behind(self.by)
        return DrawHandicap.ahead(self.by)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.by})"


def _render(name: str, args: Tuple[object, ...]) -> str:
    present = [str(arg) for arg in args if arg is not None]
    if not present:
        return name
    return f"{name}({', '.join(present)})"


class OfferKind(enum.Enum):
    HEAD_TO_HEAD = "HeadToHead"
    TOTAL_GOALS = "TotalGoals"
    CORRECT_SCORE = "CorrectScore"
    ASIAN_HANDICAP = "AsianHandicap"
    DRAW_NO_BET = "DrawNoBet"
    SPLIT_HANDICAP = "SplitHandicap"
    FIRST_GOALSCORER = "FirstGoalscorer"
    ANYTIME_GOALSCORER = "AnytimeGoalscorer"
    PLAYER_SHOTS_ON_TARGET = "PlayerShotsOnTarget"
    ANYTIME_ASSIST = "AnytimeAssist"


@dataclass(frozen=True)
class OfferType:
    """The kind of market being offered, with its parameters."""

    kind: OfferKind
    period: Optional[Period] = None
    draw_handicap: Optional[DrawHandicap] = None
    win_handicap: Optional[WinHandicap] = None
    over: Optional[Over] = None

    @classmethod
    def head_to_head(cls, period: Period, draw_handicap: DrawHandicap) -> "OfferType":
        return cls(OfferKind.HEAD_TO_HEAD, period=period, draw_handicap=draw_handicap)

    @classmethod
    def total_goals(cls, period: Period, over: Over) -> "OfferType":
        return cls(OfferKind.TOTAL_GOALS, period=period, over=over)

    @classmethod
    def correct_score(cls, period: Period) -> "OfferType":
        return cls(OfferKind.CORRECT_SCORE, period=period)

    @classmethod
    def asian_handicap(cls, period: Period, win_handicap: WinHandicap) -> "OfferType":
        return cls(OfferKind.ASIAN_HANDICAP, period=period, win_handicap=win_handicap)

    @classmethod
    def draw_no_bet(cls, draw_handicap: DrawHandicap) -> "OfferType":
        return cls(OfferKind.DRAW_NO_BET, draw_handicap=draw_handicap)

    @classmethod
    def split_handicap(
        cls, period: Period, draw_handicap: DrawHandicap, win_handicap: WinHandicap
    ) -> "OfferType":
        return cls(
            OfferKind.SPLIT_HANDICAP,
            period=period,
            draw_handicap=draw_handicap,
            win_handicap=win_handicap,
        )

    @classmethod
    def first_goalscorer(cls) -> "OfferType":
        return cls(OfferKind.FIRST_GOALSCORER)

    @classmethod
    def anytime_goalscorer(cls) -> "OfferType":
        return cls(OfferKind.ANYTIME_GOALSCORER)

    @classmethod
    def anytime_assist(cls) -> "OfferType":
        return cls(OfferKind.ANYTIME_ASSIST)

    @classmethod
    def player_shots_on_target(cls, over: Over) -> "OfferType":
        return cls(OfferKind.PLAYER_SHOTS_ON_TARGET, over=over)

    def __str__(self) -> str:
        return _render(
            self.kind.value,
            (self.period, self.draw_handicap, self.win_handicap, self.over),
        )


class OutcomeKind(enum.Enum):
    WIN = "Win"
    DRAW = "Draw"
    SPLIT_WIN = "SplitWin"
    SCORE = "Score"
    OVER = "Over"
    UNDER = "Under"
    PLAYER = "Player"
    NONE = "None"


@dataclass(frozen=True)
class Outcome:
    """A single selectable outcome of an offer."""

    kind: OutcomeKind
    side: Optional[Side] = None
    draw_handicap: Optional[DrawHandicap] = None
    win_handicap: Optional[WinHandicap] = None
    scoreline: Optional[Score] = None
    limit: Optional[int] = None
    participant: Optional[Player] = field(default=None)

    @classmethod
    def win(cls, side: Side, win_handicap: WinHandicap) -> "Outcome":
        return cls(OutcomeKind.WIN, side=side, win_handicap=win_handicap)

    @classmethod
    def draw(cls, draw_handicap: DrawHandicap) -> "Outcome":
        return cls(OutcomeKind.DRAW, draw_handicap=draw_handicap)

    @classmethod
    def split_win(
        cls, side: Side, draw_handicap: DrawHandicap, win_handicap: WinHandicap
    ) -> "Outcome":
        return cls(
            OutcomeKind.SPLIT_WIN,
            side=side,
            draw_handicap=draw_handicap,
            win_handicap=win_handicap,
        )

    @classmethod
    def score(cls, score: Score) -> "Outcome":
        return cls(OutcomeKind.SCORE, scoreline=score)

    @classmethod
    def over(cls, limit: int) -> "Outcome":
        _check_count(limit, "goal limit")
        return cls(OutcomeKind.OVER, limit=limit)

    @classmethod
    def under(cls, limit: int) -> "Outcome":
        _check_count(limit, "goal limit")
        return cls(OutcomeKind.UNDER, limit=limit)

    @classmethod
    def player(cls, player: Player) -> "Outcome":
        return cls(OutcomeKind.PLAYER, participant=player)

    @classmethod
    def none(cls) -> "Outcome":
        return cls(OutcomeKind.NONE)

    def __str__(self) -> str:
        return _render(
            self.kind.value,
            (
                self.side,
                self.draw_handicap,
                self.win_handicap,
                self.scoreline,
                self.limit,
                self.participant,
            ),
        )


@dataclass(frozen=True)
class Offer:
    """An offer: its type, its outcomes and the probability of each outcome."""

    offer_type: OfferType
    outcomes: Tuple[Outcome, ...]
    probs: Tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "outcomes", tuple(self.outcomes))
        object.__setattr__(self, "probs", tuple(float(prob) for prob in self.probs))