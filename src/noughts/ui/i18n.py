"""Internationalisation strings for the Noughts front ends.

Usage::

    from noughts.ui.i18n import t, set_language

    set_language("Japanese")
    print(t().you_win)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Console ──────────────────────────────────────────────────────────
    banner_title: str
    banner_hint: str  # how to enter a position
    prompt: str
    invalid_input: str  # e.g. "Cannot read {text!r}, try '1 a'."
    occupied: str  # e.g. "{name} is not available."
    computer_played: str  # e.g. "Computer plays {name}."

    # ── Results ──────────────────────────────────────────────────────────
    you_win: str
    you_lose: str
    draw: str
    computer_resigns: str

    # ── Qt window ────────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_quit: str
    menu_opponent: str
    opponent_ordered: str
    opponent_minimax: str
    status_your_turn: str
    status_game_over: str  # prefix, e.g. "Game over - "


_EN = Strings(
    banner_title="GAME START",
    banner_hint="input position like 1 a",
    prompt="? ",
    invalid_input="Cannot read {text!r}, try '1 a'.",
    occupied="{name} is not available.",
    computer_played="Computer plays {name}.",
    you_win="You win!",
    you_lose="You lose...",
    draw="Draw",
    computer_resigns="The computer resigns. You win!",
    window_title="Noughts",
    menu_game="&Game",
    menu_new_game="&New game",
    menu_quit="&Quit",
    menu_opponent="&Opponent",
    opponent_ordered="First available cell",
    opponent_minimax="Minimax",
    status_your_turn="Your move",
    status_game_over="Game over - ",
)

_JA = Strings(
    banner_title="ゲーム開始",
    banner_hint="「1 a」のように位置を入力してください",
    prompt="? ",
    invalid_input="{text!r} は読み取れません。「1 a」の形式で入力してください。",
    occupied="{name} には置けません。",
    computer_played="コンピュータは {name} に置きました。",
    you_win="あなたの勝ちです！",
    you_lose="あなたの負けです…",
    draw="引き分け",
    computer_resigns="コンピュータが投了しました。あなたの勝ちです！",
    window_title="三目並べ",
    menu_game="ゲーム(&G)",
    menu_new_game="新しいゲーム(&N)",
    menu_quit="終了(&Q)",
    menu_opponent="対戦相手(&O)",
    opponent_ordered="空いているマスから順に",
    opponent_minimax="ミニマックス",
    status_your_turn="あなたの番です",
    status_game_over="ゲーム終了 - ",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Japanese": _JA,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active string table."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
