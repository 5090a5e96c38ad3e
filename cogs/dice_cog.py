import re

import discord
from discord.ext import commands

from models.errors import DiceError
from utils.dice import evaluate, format_error_message, format_roll_result
from utils.logger import get_logger

# 聊天中直接輸入的擲骰指令，例如 "/r 2d20m1+3"
ROLL_COMMAND_PATTERN = re.compile(r"^/(rolar|r)(\s|$)", re.IGNORECASE)
GENERIC_ERROR_MESSAGE = "Erro ao processar o comando."
# Discord 單則訊息的字數上限
MESSAGE_LIMIT = 2000

logger = get_logger()


class DiceCog(commands.Cog, name="Dice"):
    """骰子相關指令"""
    def __init__(self, bot, config_manager):
        self.bot = bot
        self.config_manager = config_manager

    def roll_for(self, display_name: str, command: str) -> str:
        """計算擲骰指令並返回要回覆的文字"""
        try:
            result = evaluate(command, max_dice=self.config_manager.config.max_dice_count)
        except DiceError as e:
            return format_error_message(display_name, e.message)
        except Exception as e:
            logger.error(f"處理指令時出現錯誤: {command!r}: {e}", exc_info=True)
            return format_error_message(display_name, GENERIC_ERROR_MESSAGE)

        logger.info(f"{display_name} 擲骰: {command} = {result.total}")
        return format_roll_result(display_name, result, max_length=MESSAGE_LIMIT)

    async def send_reply(self, channel, text: str):
        """發送回覆，發送失敗只記錄日誌"""
        try:
            await channel.send(text)
        except discord.HTTPException as e:
            logger.error(f"發送訊息失敗: {e}")

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        """處理直接輸入的 /r 與 /rolar 指令"""
        if message.author.bot:
            return
        if not ROLL_COMMAND_PATTERN.match(message.content):
            return

        logger.info(f"偵測到指令: {message.content}")
        reply = self.roll_for(message.author.display_name, message.content)
        await self.send_reply(message.channel, reply)

    @commands.hybrid_command(name="r", description="擲骰子，例如 2d20m1+3")
    async def r_command(self, ctx, *, expression: str):
        """擲骰子"""
        await self.send_reply(ctx, self.roll_for(ctx.author.display_name, f"/r {expression}"))

    @commands.hybrid_command(name="rolar", description="擲骰子，例如 2d20m1+3")
    async def rolar_command(self, ctx, *, expression: str):
        """擲骰子"""
        await self.send_reply(ctx, self.roll_for(ctx.author.display_name, f"/rolar {expression}"))


async def setup(bot):
    """設置Cog"""
    await bot.add_cog(DiceCog(bot, bot.config_manager))
