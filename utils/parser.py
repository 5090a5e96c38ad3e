import re
from typing import List, Tuple

from models.errors import (
    DiceCountExceeded,
    InvalidDiceCount,
    InvalidFormat,
    InvalidSides,
    ModifierCountOutOfRange,
)
from models.types import DiceSpec, Literal, Modifier, ModifierKind, Term

MAX_DICE = 1000
OPERATORS = "+-*/"
# 數字最多的有效位數
MAX_DIGITS = 9

# 指令前綴: /rolar 或 /r，後面至少一個空白
COMMAND_PATTERN = re.compile(r"^/(rolar|r)(?:\s+(.*?))?\s*$", re.IGNORECASE | re.DOTALL)
# 擲骰項: [數量]d面數[修正字母 數量]
DICE_PATTERN = re.compile(r"^([0-9]*)[dD]([0-9]+)(?:([msM]+)([0-9]+))?$")
LITERAL_PATTERN = re.compile(r"^[0-9]+$")
SPLIT_PATTERN = re.compile(r"(?=[+\-*/])")


def extract_expression(raw: str) -> str:
    """從指令中取出表達式部分，例如 "/r 2d6+1" -> "2d6+1" """
    match = COMMAND_PATTERN.match(raw.strip())
    if not match or not match.group(2):
        raise InvalidFormat(f"prefixo ou expressão ausente: {raw!r}")
    return match.group(2)


def split_terms(expr: str) -> List[str]:
    """
    在每個運算符前切分表達式，運算符保留在各段開頭
    "2d20m1 + 3 -1d6" -> ["2d20m1", "+3", "-1d6"]
    """
    slices = []
    for index, part in enumerate(SPLIT_PATTERN.split(expr.strip())):
        part = part.strip()
        if index == 0 and not part:
            continue  # 表達式以運算符開頭
        if part and part[0] in OPERATORS:
            part = part[0] + part[1:].strip()
        slices.append(part)
    return slices


def split_operator(term: str) -> Tuple[str, str]:
    """拆出開頭的運算符（預設為 +）"""
    if term and term[0] in OPERATORS:
        return term[0], term[1:]
    return "+", term


def _bounded_count(digits: str) -> int:
    """解析數量，位數超過上限時視為 10**MAX_DIGITS（必定超出允許範圍）"""
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_DIGITS:
        return 10 ** MAX_DIGITS
    return int(significant)


def _parse_number(digits: str) -> int:
    """解析面數或常數，位數過多時拋出 InvalidFormat"""
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_DIGITS:
        raise InvalidFormat(f"número grande demais: {digits[:20]}...")
    return int(significant)


def _parse_dice_body(body: str) -> DiceSpec:
    match = DICE_PATTERN.match(body)
    if not match:
        raise InvalidFormat(f"definição de dados inválida: {body!r}")

    count_str, sides_str, letters, modifier_count = match.groups()
    modifier = None
    if letters is not None:
        kind = ModifierKind.from_letters(letters)
        if kind is None:
            raise InvalidFormat(f"modificador inválido: {letters!r}")
        modifier = Modifier(kind=kind, count=_bounded_count(modifier_count))

    return DiceSpec(
        count=_bounded_count(count_str) if count_str else 1,
        sides=_parse_number(sides_str),
        modifier=modifier
    )


def check_dice_spec(spec: DiceSpec, max_dice: int = MAX_DICE):
    """檢查骰子數量、面數與修正數量"""
    if spec.count < 1:
        raise InvalidDiceCount()
    if spec.count > max_dice:
        raise DiceCountExceeded(max_dice)
    if spec.sides < 1:
        raise InvalidSides(spec.sides)
    if spec.modifier is not None and spec.modifier.count > spec.count:
        raise ModifierCountOutOfRange(spec.modifier.count, spec.count)


def parse_dice_term(term: str, max_dice: int = MAX_DICE) -> Tuple[str, DiceSpec]:
    """解析擲骰項，例如 "-2d20m1" -> ("-", DiceSpec(2, 20, m1))"""
    operator, body = split_operator(term)
    spec = _parse_dice_body(body)
    check_dice_spec(spec, max_dice)
    return operator, spec


def parse_literal_term(term: str) -> Tuple[str, int]:
    """解析常數項，例如 "*3" -> ("*", 3)"""
    operator, body = split_operator(term)
    if not LITERAL_PATTERN.match(body):
        raise InvalidFormat(f"valor numérico inválido: {body!r}")
    return operator, _parse_number(body)


def _is_dice(term: str) -> bool:
    return "d" in term or "D" in term


def _parse_terms(raw: str) -> List[Term]:
    """只做語法解析，不檢查數量範圍"""
    slices = split_terms(extract_expression(raw))
    if not slices:
        raise InvalidFormat(f"expressão vazia: {raw!r}")

    terms = []
    for index, part in enumerate(slices):
        if index == 0 and part[0] in OPERATORS:
            # 第一項前不能有運算符
            raise InvalidFormat(f"operador antes do primeiro termo: {part!r}")
        operator, body = split_operator(part)
        if _is_dice(body):
            spec = _parse_dice_body(body)
            if index > 0 and spec.modifier is not None:
                # 只有第一個擲骰項可以帶修正
                raise InvalidFormat(f"modificador fora do primeiro termo: {part!r}")
            terms.append(Term(operator=operator, payload=spec))
        else:
            _, value = parse_literal_term(part)
            terms.append(Term(operator=operator, payload=Literal(value)))
    return terms


def parse_command(raw: str, max_dice: int = MAX_DICE) -> List[Term]:
    """
    將完整指令解析為有序的項目列表
    語法錯誤時拋出 InvalidFormat，數量超出範圍時拋出對應錯誤
    """
    terms = _parse_terms(raw)
    for term in terms:
        if term.is_dice:
            check_dice_spec(term.payload, max_dice)
    return terms


def validate(raw: str) -> bool:
    """檢查指令是否符合擲骰語法"""
    try:
        _parse_terms(raw)
    except InvalidFormat:
        return False
    return True
