INVALID_FORMAT_MESSAGE = (
    "Formato de comando inválido. Exemplos:\n"
    "/r 2d20m1 (rola 2d20 mantendo o maior)\n"
    "/r 2d20mm1 (rola 2d20 mantendo o menor)\n"
    "/r 2d20sM1 (rola 2d20 soltando o maior)\n"
    "/r 2d20sm1 (rola 2d20 soltando o menor)"
)


class DiceError(ValueError):
    """擲骰錯誤基類，message 為可直接回覆給使用者的文字"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.detail = message


class InvalidFormat(DiceError):
    """指令格式錯誤"""

    def __init__(self, detail: str = ""):
        super().__init__(INVALID_FORMAT_MESSAGE)
        # 僅供日誌使用，不回覆給使用者
        self.detail = detail


class DiceCountExceeded(DiceError):
    def __init__(self, limit: int):
        super().__init__(f"O número de dados não pode ser maior que {limit}")
        self.limit = limit


class InvalidDiceCount(DiceError):
    def __init__(self):
        super().__init__("O número de dados deve ser pelo menos 1")


class InvalidSides(DiceError):
    def __init__(self, sides: int):
        super().__init__("O número de lados deve ser maior que zero.")
        self.sides = sides


class DivisionByZero(DiceError):
    def __init__(self):
        super().__init__("Não é possível dividir por zero.")


class ModifierCountOutOfRange(DiceError):
    def __init__(self, modifier_count: int, dice_count: int):
        super().__init__(
            f"O modificador não pode manter ou soltar mais dados ({modifier_count}) "
            f"do que os rolados ({dice_count})."
        )
        self.modifier_count = modifier_count
        self.dice_count = dice_count
