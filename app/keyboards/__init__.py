"""Reply keyboards."""

from app.keyboards.menus import build_answer_keyboard, remove_answer_keyboard

__all__ = ["build_answer_keyboard", "remove_answer_keyboard"]
