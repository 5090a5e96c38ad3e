import os
from pathlib import Path
from typing import Optional

import discord
from discord.ext import commands
from dotenv import load_dotenv

from utils.config import ConfigManager
from utils.logger import get_logger

logger = get_logger()


class RPGDiceBot:
    """擲骰機器人類"""
    def __init__(self, root_dir: Optional[Path] = None):
        root_dir = root_dir or self.find_project_root()

        # 查找環境變量文件
        env_file = root_dir / ".env"
        if env_file.is_file():
            load_dotenv(dotenv_path=env_file)

        # 從環境變量獲取token
        token = os.getenv("DISCORD_TOKEN")
        if not token:
            raise ValueError("未找到 DISCORD_TOKEN 環境變量，請在 .env 文件或終端中設置")

        self.token = token
        self.config_manager = ConfigManager(config_path=str(root_dir / "config.json"))
        config = self.config_manager.config
        logger.configure(config.log_file, config.log_level)

        # 設置機器人
        intents = discord.Intents.default()
        intents.message_content = True  # 需要讀取消息內容

        self.bot = commands.Bot(
            command_prefix=config.command_prefix,
            intents=intents,
            description="Bot de rolagem de dados para RPG"
        )
        # 供 Cog 的 setup 函數使用
        self.bot.config_manager = self.config_manager

        self.setup_events()

    @staticmethod
    def find_project_root() -> Path:
        """查找項目根目錄"""
        current_path = Path(__file__).resolve()

        for parent in current_path.parents:
            if (parent / '.git').exists() or (parent / 'pyproject.toml').exists():
                return parent

        return current_path.parent

    def setup_events(self):
        """設置事件處理器"""
        @self.bot.event
        async def on_ready():
            logger.info(f'{self.bot.user} 已經上線! 已連接到 {len(self.bot.guilds)} 個服務器')

            # 同步應用命令
            try:
                await self.bot.tree.sync()
                logger.info("應用命令已同步")
            except discord.HTTPException as e:
                logger.error(f"同步應用命令時出錯: {e}")

    async def add_cogs(self):
        """添加Cog模塊"""
        for extension in ("cogs.dice_cog", "cogs.help_cog"):
            await self.bot.load_extension(extension)

    async def start(self):
        """啟動機器人"""
        await self.add_cogs()
        await self.bot.start(self.token)

    async def close(self):
        """關閉機器人"""
        if not self.bot.is_closed():
            await self.bot.close()
