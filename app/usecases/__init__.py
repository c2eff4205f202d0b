"""Use cases (application layer)."""

from app.usecases.answer_prompt import AnswerPromptUseCase
from app.usecases.show_standings import ShowStandingsUseCase
from app.usecases.start_round import StartRoundUseCase

__all__ = [
    "AnswerPromptUseCase",
    "ShowStandingsUseCase",
    "StartRoundUseCase",
]
