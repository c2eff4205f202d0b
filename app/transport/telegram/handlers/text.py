"""Text message handlers."""

import logging

from aiogram import F, Router, types

from app.domain.reply import ReplyKind
from app.providers import DIContainer
from app.services.reply_parser import classify_reply
from app.utils.context import extract_context, extract_username

logger = logging.getLogger(__name__)

router = Router()


@router.message(F.text, ~F.text.startswith("/"))
async def handle_answer(msg: types.Message, container: DIContainer) -> None:
    """Handle yes/no answers to the hosting prompt."""
    chat_id, topic_id = extract_context(msg)
    if not container.is_rotation_chat(chat_id, topic_id):
        return

    kind = classify_reply(msg.text)
    if kind is ReplyKind.OTHER:
        return

    username = extract_username(msg)
    outcome = await container.answer_prompt.execute(username, kind, chat_id=chat_id)
    logger.debug("ANSWER: @%s said %s -> %s", username, kind.value, outcome.value)
