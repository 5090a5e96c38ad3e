import logging
from logging.handlers import RotatingFileHandler


LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class DiscordLogger:
    """自定義日誌系統"""

    def __init__(self, log_file: str = "bot.log", level: int = logging.INFO):
        self.logger = logging.getLogger('RPGDiceBot')
        self.logger.setLevel(level)

        # 避免重複添加處理器
        if not self.logger.handlers:
            self._add_handlers(log_file)

    def _add_handlers(self, log_file: str):
        # 設置文件處理器（帶輪換）
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,  # 1MB
            backupCount=5,
            encoding='utf-8'
        )

        # 設置控制台處理器
        console_handler = logging.StreamHandler()

        # 設置格式
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

    def configure(self, log_file: str, level: str = "INFO"):
        """依配置重新設置日誌文件與級別"""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
        self._add_handlers(log_file)
        self.logger.setLevel(LEVELS.get(level.upper(), logging.INFO))

    def info(self, message: str):
        """記錄信息級別日誌"""
        self.logger.info(message)

    def warning(self, message: str):
        """記錄警告級別日誌"""
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        """記錄錯誤級別日誌"""
        self.logger.error(message, exc_info=exc_info)

    def debug(self, message: str):
        """記錄調試級別日誌"""
        self.logger.debug(message)


# 創建全局日誌實例
logger = DiscordLogger()


def get_logger() -> DiscordLogger:
    """獲取日誌實例"""
    return logger
