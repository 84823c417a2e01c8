from decimal import Decimal

NUMBER_SEPARATOR = ","
DECIMAL_POINT = "."
CURRENCY_SYMBOL = "$"

# 128-bit decimal limits: 96-bit integer mantissa, at most 28 fractional digits.
DECIMAL_MAX = Decimal("79228162514264337593543950335")
DECIMAL_MAX_SCALE = 28
SUM_PRECISION = 120

FILE_ENCODING = "utf-8-sig"
FILE_DECODE_ERRORS = "replace"

WINDOWS_INVALID_PATH_CHARS = '<>"|?*'

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
