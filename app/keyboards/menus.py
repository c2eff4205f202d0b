"""Reply keyboards."""

from aiogram import types

from app.services.reply_parser import NO_I_CAN_NOT, YES_I_CAN


def build_answer_keyboard() -> types.ReplyKeyboardMarkup:
    """One-time keyboard with the two accepted answers to a hosting prompt."""
    return types.ReplyKeyboardMarkup(
        keyboard=[[types.KeyboardButton(text=YES_I_CAN), types.KeyboardButton(text=NO_I_CAN_NOT)]],
        one_time_keyboard=True,
        resize_keyboard=True,
    )


def remove_answer_keyboard() -> types.ReplyKeyboardRemove:
    """Hide the answer keyboard once the host is known."""
    return types.ReplyKeyboardRemove(remove_keyboard=True)
