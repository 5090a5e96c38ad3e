import random
from typing import List, Optional, Sequence

from models.errors import DiceError, DivisionByZero, InvalidFormat
from models.types import DiceSpec, KeptOutcome, Modifier, ModifierKind, RollOutcome, RollResult, Term
from utils.logger import get_logger
from utils.parser import MAX_DICE, parse_command

CRITICAL_SUCCESS_MESSAGE = "🎯 CRÍTICO! Acerto Natural 20!"
CRITICAL_FAIL_MESSAGE = "💀 FALHA CRÍTICA! 1 Natural!"
TRUNCATED_SUFFIX = " … (resumido)"

logger = get_logger()


def roll(count: int, sides: int, rng: random.Random) -> RollOutcome:
    """擲 count 顆 sides 面骰，保持擲骰順序"""
    return RollOutcome(raw_results=tuple(rng.randint(1, sides) for _ in range(count)))


def apply_modifier(outcome: RollOutcome, modifier: Optional[Modifier]) -> KeptOutcome:
    """
    套用保留/捨棄修正
    無修正時保持擲骰順序；有修正時返回由小到大排序後選出的骰子
    """
    if modifier is None:
        return KeptOutcome(selected=outcome.raw_results, total=sum(outcome.raw_results))

    ordered = sorted(outcome.raw_results)
    n = len(ordered)
    k = min(modifier.count, n)

    if modifier.kind is ModifierKind.KEEP_HIGHEST:
        selected = ordered[n - k:]
    elif modifier.kind is ModifierKind.KEEP_LOWEST:
        selected = ordered[:k]
    elif modifier.kind is ModifierKind.DROP_HIGHEST:
        selected = ordered[:n - k]
    else:
        selected = ordered[k:]

    return KeptOutcome(selected=tuple(selected), total=sum(selected))


def detect_critical(sides: int, selected: Sequence[int]) -> str:
    """檢查大成功/大失敗 (僅適用於d20)"""
    if sides != 20:
        return ""
    if 20 in selected:
        return CRITICAL_SUCCESS_MESSAGE
    if 1 in selected:
        return CRITICAL_FAIL_MESSAGE
    return ""


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend >= 0) == (divisor > 0) else -quotient


def apply_operator(total: int, operand: int, operator: str) -> int:
    """依運算符合併目前總和與新值（由左至右，無優先級）"""
    if operator == "+":
        return total + operand
    if operator == "-":
        return total - operand
    if operator == "*":
        return total * operand
    if operator == "/":
        if operand == 0:
            raise DivisionByZero()
        return _truncating_div(total, operand)
    raise InvalidFormat(f"operador desconhecido: {operator!r}")


def format_dice_group(selected: Sequence[int]) -> str:
    """骰子組顯示為 (a + b + c)"""
    return "(" + " + ".join(map(str, selected)) + ")"


def _evaluate_dice(spec: DiceSpec, rng: random.Random):
    outcome = roll(spec.count, spec.sides, rng)
    logger.debug(f"擲骰 {spec.count}d{spec.sides}: {list(outcome.raw_results)}")
    kept = apply_modifier(outcome, spec.modifier)
    if spec.modifier is not None:
        logger.debug(f"套用修正 {spec.modifier.kind.value}{spec.modifier.count}: {list(kept.selected)}")
    return kept, detect_critical(spec.sides, kept.selected)


def evaluate_terms(terms: List[Term], rng: random.Random) -> RollResult:
    """由左至右計算所有項目，組合總和、顯示字串與大成功/大失敗訊息"""
    total = 0
    fragments = []
    critical_message = ""

    for term in terms:
        if term.is_dice:
            kept, critical = _evaluate_dice(term.payload, rng)
            value = kept.total
            fragment = format_dice_group(kept.selected)
            if critical:
                # 多個d20項時以最後一個為準
                critical_message = critical
        else:
            value = term.payload.value
            fragment = str(value)

        if fragments:
            fragments.append(f" {term.operator} ")
        fragments.append(fragment)
        total = apply_operator(total, value, term.operator)

    result = RollResult(total=total, visual="".join(fragments), critical_message=critical_message)
    logger.debug(f"結果: total={result.total}, visual={result.visual}")
    return result


def evaluate(command: str, rng: Optional[random.Random] = None, max_dice: int = MAX_DICE) -> RollResult:
    """
    解析並計算擲骰指令，例如 "/r 2d20m1+3"

    rng 只需提供 randint(a, b)；未指定時每次呼叫建立新的 random.Random，
    避免多個同時進行的擲骰共用同一個產生器
    """
    logger.debug(f"收到指令: {command}")
    if rng is None:
        rng = random.Random()
    try:
        return evaluate_terms(parse_command(command, max_dice), rng)
    except DiceError as e:
        logger.warning(f"無效的指令: {command!r} ({e.detail})")
        raise


def format_roll_result(display_name: str, result: RollResult, max_length: Optional[int] = None) -> str:
    """
    格式化骰子結果
    指定 max_length 時，過長的顯示字串會被截斷，總和與大成功/大失敗訊息保持完整
    """
    header = f"🎲 {display_name} rolou:\n{result.total}\n\n"
    footer = f"\n{result.critical_message}" if result.critical_message else ""
    visual = result.visual

    if max_length is not None and len(header) + len(visual) + len(footer) > max_length:
        room = max(max_length - len(header) - len(footer) - len(TRUNCATED_SUFFIX), 0)
        visual = visual[:room] + TRUNCATED_SUFFIX
        return (header + visual + footer)[:max_length]
    return header + visual + footer


def format_error_message(display_name: str, error: str) -> str:
    """格式化錯誤訊息"""
    return f"{display_name}, aconteceu um erro interno...\n{error}"
