import pytest

from bot import RPGDiceBot


@pytest.fixture
def no_token(monkeypatch):
    # 先設置再刪除，測試結束後會還原為原本的狀態
    monkeypatch.setenv("DISCORD_TOKEN", "placeholder")
    monkeypatch.delenv("DISCORD_TOKEN")


def test_missing_token(tmp_path, no_token):
    with pytest.raises(ValueError):
        RPGDiceBot(root_dir=tmp_path)


def test_token_from_env_file(tmp_path, no_token):
    (tmp_path / ".env").write_text("DISCORD_TOKEN=abc\n", encoding="utf-8")

    bot = RPGDiceBot(root_dir=tmp_path)

    assert bot.token == "abc"
    assert (tmp_path / "config.json").exists()


async def test_add_cogs(tmp_path, monkeypatch):
    monkeypatch.setenv("DISCORD_TOKEN", "abc")
    (tmp_path / "config.json").write_text('{"command_prefix": "?"}', encoding="utf-8")

    bot = RPGDiceBot(root_dir=tmp_path)
    await bot.add_cogs()
    try:
        assert bot.bot.command_prefix == "?"
        assert bot.bot.get_cog("Dice") is not None
        assert bot.bot.get_cog("Help") is not None
        assert bot.bot.get_command("rolar") is not None
        assert bot.bot.get_command("start") is not None
    finally:
        # 卸載擴展，避免影響其他測試中導入的模組
        for extension in list(bot.bot.extensions):
            await bot.bot.unload_extension(extension)
