#!/usr/bin/env python3
"""
RPG Dice Bot
聊天擲骰機器人，支援 /r 與 /rolar 指令
"""

import asyncio
import os
import sys

from dotenv import load_dotenv

# 加載環境變量
load_dotenv()

# 確保路徑正確
sys.path.insert(0, os.path.dirname(__file__))

from bot import RPGDiceBot
from utils.logger import get_logger


async def run(bot: RPGDiceBot):
    """運行機器人，結束時確保關閉連線"""
    try:
        await bot.start()
    finally:
        await bot.close()


def main():
    """主函數"""
    logger = get_logger()

    logger.info("正在啟動 RPG Dice Bot...")

    try:
        bot = RPGDiceBot()
    except ValueError as e:
        logger.error(f"錯誤：{e}")
        sys.exit(1)

    try:
        asyncio.run(run(bot))
    except KeyboardInterrupt:
        logger.info("收到中斷信號，正在關閉機器人...")
    finally:
        logger.info("機器人已關閉")


if __name__ == "__main__":
    main()
