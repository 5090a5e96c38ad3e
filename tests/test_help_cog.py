from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from cogs.help_cog import HELP_TEXT, START_TEXT, HelpCog


@pytest.fixture
def ctx():
    return SimpleNamespace(send=AsyncMock())


async def test_start_greets(ctx):
    cog = HelpCog(MagicMock())
    await cog.start_command.callback(cog, ctx)
    ctx.send.assert_awaited_once_with(START_TEXT)


async def test_help_lists_modifiers(ctx):
    cog = HelpCog(MagicMock())
    await cog.help_command.callback(cog, ctx)

    embed = ctx.send.await_args.kwargs["embed"]
    assert embed.description == HELP_TEXT
    assert "/r 2d20sm1" in embed.description
