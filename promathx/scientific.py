import re
import math

from .error import InvalidFormat


RE_SCIENTIFIC = re.compile(r'^(-?\d*\.?\d+)e(-?\d+)$', re.I)


def _scale(value, exponent):
    if exponent < -300:
        return value * 1e300 / 10.0 ** (exponent + 300)
    return value / 10.0 ** exponent

def format(value, precision=6):
    # pylint: disable=redefined-builtin
    if value == 0:
        return '0'
    if not math.isfinite(value):
        return str(float(value))
    exponent = math.floor(math.log10(abs(value)))
    mantissa = '%.*f' % (precision, _scale(value, exponent))
    if abs(float(mantissa)) >= 10:
        exponent += 1
        mantissa = '%.*f' % (precision, _scale(value, exponent))
    return '%se%d' % (mantissa, exponent)

def parse(value):
    if not isinstance(value, str):
        raise InvalidFormat('Input must be a string')
    match = RE_SCIENTIFIC.match(value)
    if match is None:
        raise InvalidFormat('Invalid scientific notation format')
    mantissa, exponent = match.groups()
    try:
        return float(mantissa) * 10.0 ** int(exponent)
    except OverflowError as ex:
        raise InvalidFormat('Exponent out of range: %s' % value) from ex
