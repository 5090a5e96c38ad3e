import json
import os
from dataclasses import dataclass, asdict, fields

from utils.parser import MAX_DICE, MAX_DIGITS


@dataclass
class BotConfig:
    """機器人配置"""
    command_prefix: str = "!"
    max_dice_count: int = MAX_DICE
    log_file: str = "bot.log"
    log_level: str = "INFO"

    def __post_init__(self):
        if not 1 <= self.max_dice_count < 10 ** MAX_DIGITS:
            raise ValueError(f"max_dice_count 必須介於 1 與 {10 ** MAX_DIGITS - 1} 之間")


class ConfigManager:
    """配置管理器"""
    def __init__(self, config_path: str = "config.json"):
        self.config_path = config_path
        self.config = BotConfig()
        self.load_config()

    def load_config(self):
        """加載配置"""
        if os.path.exists(self.config_path):
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            # 忽略未知的欄位
            known = {field.name for field in fields(BotConfig)}
            self.config = BotConfig(**{key: value for key, value in data.items() if key in known})
        else:
            # 如果配置文件不存在，創建默認配置
            self.save_config()

    def save_config(self):
        """保存配置"""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self.config), f, ensure_ascii=False, indent=2)

    def set_config(self, config: BotConfig):
        """設置並保存配置"""
        self.config = config
        self.save_config()
