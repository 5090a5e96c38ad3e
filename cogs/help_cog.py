import discord
from discord.ext import commands


HELP_TEXT = (
    "**/r <expressão>** ou **/rolar <expressão>**\n"
    "Rola dados no formato `[quantidade]d<lados>`, com números e operadores "
    "`+ - * /` avaliados da esquerda para a direita.\n\n"
    "**Modificadores** (apenas no primeiro grupo de dados)\n"
    "`/r 2d20m1` (rola 2d20 mantendo o maior)\n"
    "`/r 2d20mm1` (rola 2d20 mantendo o menor)\n"
    "`/r 2d20sM1` (rola 2d20 soltando o maior)\n"
    "`/r 2d20sm1` (rola 2d20 soltando o menor)\n\n"
    "Em d20, um 20 natural é crítico e um 1 natural é falha crítica."
)

START_TEXT = (
    "Olá! Eu sou o RPG Dice Bot 🎲\n"
    "Use `/r 2d20m1+3` para rolar dados ou `/comandos` para ver todos os comandos."
)


class HelpCog(commands.Cog, name="Help"):
    """幫助相關指令"""
    def __init__(self, bot):
        self.bot = bot

    @commands.hybrid_command(name="comandos", aliases=["c"], description="顯示指令說明")
    async def help_command(self, ctx):
        """顯示幫助信息"""
        embed = discord.Embed(
            title="Comandos do RPG Dice Bot",
            description=HELP_TEXT,
            color=0x1abc9c
        )
        await ctx.send(embed=embed)

    @commands.hybrid_command(name="start", description="顯示歡迎訊息")
    async def start_command(self, ctx):
        """歡迎訊息"""
        await ctx.send(START_TEXT)


async def setup(bot):
    """設置Cog"""
    await bot.add_cog(HelpCog(bot))
