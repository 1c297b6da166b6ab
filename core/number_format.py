# Турецький формат чисел: "." розділяє тисячі, "," це десяткова кома.
import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext

_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_turkish_number(raw: str | None) -> float | None:
    """
    "1.234,56" -> 1234.56.
    Крапки прибираємо, першу кому міняємо на крапку і читаємо числовий
    префікс рядка. Якщо числа немає, повертаємо None.
    """
    if raw is None:
        return None

    normalized = raw.replace(".", "").replace(",", ".", 1)
    match = _NUMBER_PREFIX.match(normalized)
    if not match:
        return None

    value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value


def format_turkish(value: float | int | None, digits: int = 2) -> str:
    """Форматує число як у tr-TR: 1234.5 -> "1.234,50", 0.125 -> "0,13"."""
    if value is None:
        return ""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ""
    if math.isnan(number):
        return ""
    if math.isinf(number):
        return "∞" if number > 0 else "-∞"

    # Половину округлюємо від нуля, як Intl.NumberFormat
    with localcontext() as ctx:
        ctx.prec = 400  # вистачає для будь-якого скінченного float
        dec = Decimal(number).quantize(Decimal(10) ** -digits, rounding=ROUND_HALF_UP)
    text = f"{dec:,.{digits}f}"
    # "1,234.50" -> "1.234,50"
    return text.replace(",", "\0").replace(".", ",").replace("\0", ".")
