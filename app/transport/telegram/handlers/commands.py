"""Command handlers."""

from aiogram import Router, types
from aiogram.filters import Command

from app.providers import DIContainer
from app.utils.audit import audit_log
from app.utils.context import extract_context, extract_username
from app.utils.telegram import safe_call
from config import ROTATION_CRON, ROTATION_TIMEZONE

router = Router()


@router.message(Command("start"))
async def cmd_start(msg: types.Message, container: DIContainer) -> None:
    """Handle /start: use this chat for the weekly hosting rounds."""
    chat_id, topic_id = extract_context(msg)
    username = extract_username(msg)

    if container.ledger.find(username) is None:
        await safe_call(msg.answer, "❌ Only members of the rotation can choose its chat.")
        return

    if not container.can_bind_chat(chat_id, topic_id):
        await safe_call(
            msg.answer,
            "❌ The rotation already runs in another chat. Finish the current round there first.",
        )
        return

    container.bind_chat(chat_id, topic_id)
    audit_log("bind_chat", username, chat_id, topic_id)

    roster = ", ".join(member.mention for member in container.ledger.members)
    await safe_call(
        msg.answer,
        "👋 I will pick a host for the group in this chat.\n\n"
        f"Rotation: {roster}\n"
        f"Schedule: {ROTATION_CRON} ({ROTATION_TIMEZONE})\n\n"
        "/standings shows who is next, /host asks right away.",
    )


@router.message(Command("standings"))
async def cmd_standings(msg: types.Message, container: DIContainer) -> None:
    """Handle /standings: weeks since hosting per member."""
    chat_id, topic_id = extract_context(msg)
    if not container.is_rotation_chat(chat_id, topic_id):
        return

    await container.show_standings.execute()


@router.message(Command("host"))
async def cmd_host(msg: types.Message, container: DIContainer) -> None:
    """Handle /host: start a round now instead of waiting for the schedule."""
    chat_id, topic_id = extract_context(msg)
    if not container.is_rotation_chat(chat_id, topic_id):
        return

    username = extract_username(msg)
    if container.ledger.find(username) is None:
        await safe_call(msg.answer, "❌ Only members of the rotation can start a round.")
        return

    started = await container.start_round.execute(trigger="manual", chat_id=chat_id)
    # the round may already be over by the time metrics are recorded
    candidate = container.negotiation.candidate
    if started:
        audit_log(
            "manual_round",
            username,
            chat_id,
            topic_id,
            extra={"candidate": candidate.username if candidate else None},
        )
        return

    if candidate is None:
        await safe_call(msg.answer, "⏳ A round just finished, try /host again.")
        return
    await safe_call(
        msg.answer,
        f"⏳ Still waiting for an answer from {candidate.mention}.",
    )
