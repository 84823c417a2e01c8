import re
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation
from typing import List, Optional

from maxsumline import config


_WS = r"[\t\n\v\f\r ]*"
_CUR = re.escape(config.CURRENCY_SYMBOL)
_NUMBER_RE = re.compile(
    rf"""
    ^{_WS}
    (?P<open>\()?{_WS}
    (?P<lead_cur>{_CUR})?{_WS}
    (?P<lead_sign>[+-])?{_WS}
    (?P<mid_cur>{_CUR})?{_WS}
    (?P<mantissa>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)
    (?:[eE](?P<exponent>[+-]?[0-9]+))?{_WS}
    (?P<trail_cur>{_CUR})?{_WS}
    (?P<trail_sign>[+-])?{_WS}
    (?P<close>\))?{_WS}$
    """,
    re.VERBOSE,
)
_PARSE_CONTEXT = Context(prec=config.SUM_PRECISION, rounding=ROUND_HALF_EVEN)
_SCALE_QUANTUM = Decimal(1).scaleb(-config.DECIMAL_MAX_SCALE)


def split_tokens(line: str) -> List[str]:
    return [token for token in (line or "").split(config.NUMBER_SEPARATOR) if token]


def parse_decimal(token: str) -> Optional[Decimal]:
    match = _NUMBER_RE.match(token or "")
    if not match:
        return None

    parts = match.groupdict()
    currency_count = sum(1 for key in ("lead_cur", "mid_cur", "trail_cur") if parts[key])
    if currency_count > 1:
        return None
    if parts["lead_sign"] and parts["trail_sign"]:
        return None
    if bool(parts["open"]) != bool(parts["close"]):
        return None
    if parts["open"] and (parts["lead_sign"] or parts["trail_sign"]):
        return None

    literal = parts["mantissa"]
    if literal.endswith(config.DECIMAL_POINT):
        literal = literal[:-1]
    if not literal.strip("0" + config.DECIMAL_POINT):
        return Decimal(0)
    if parts["exponent"]:
        literal = f"{literal}e{parts['exponent']}"
    try:
        value = Decimal(literal)
        if value > config.DECIMAL_MAX:
            return None
        if value.as_tuple().exponent < -config.DECIMAL_MAX_SCALE:
            value = value.quantize(_SCALE_QUANTUM, context=_PARSE_CONTEXT)
    except (InvalidOperation, ValueError):
        return None

    negative = parts["open"] or "-" in (parts["lead_sign"], parts["trail_sign"])
    return value.copy_negate() if negative else value


def is_decimal(token: str) -> bool:
    return parse_decimal(token) is not None
