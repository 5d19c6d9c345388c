"""Bitcoin Script primitive codec.

A single script element is one opcode byte optionally followed by data:

- ``0``: zero / false
- ``79`` to ``96`` (except ``80``): small integer ``opcode - 80``
- ``1`` to ``75``: push of that many bytes
- ``76`` / ``77`` / ``78``: push whose length follows as an 8 / 16 / 32 bit integer
- anything else: a named opcode
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, Union

from ..exceptions import InvalidInputError, InvalidOpCodeError
from .primitives import as_integral, make_buffer, read_big_int, read_buffer, read_int

if TYPE_CHECKING:
    from .bitstream import BitStream


class OpCode(enum.IntEnum):
    """Named script opcodes."""

    OP_0 = 0
    OP_FALSE = 0
    OP_PUSHDATA1 = 76
    OP_PUSHDATA2 = 77
    OP_PUSHDATA4 = 78
    OP_1NEGATE = 79
    OP_TRUE = 81
    OP_1 = 81
    OP_2 = 82
    OP_3 = 83
    OP_4 = 84
    OP_5 = 85
    OP_6 = 86
    OP_7 = 87
    OP_8 = 88
    OP_9 = 89
    OP_10 = 90
    OP_11 = 91
    OP_12 = 92
    OP_13 = 93
    OP_14 = 94
    OP_15 = 95
    OP_16 = 96
    OP_NOP = 97
    OP_IF = 99
    OP_NOTIF = 100
    OP_ELSE = 103
    OP_ENDIF = 104
    OP_VERIFY = 105
    OP_RETURN = 106
    OP_TOALTSTACK = 107
    OP_FROMALTSTACK = 108
    OP_2DROP = 109
    OP_2DUP = 110
    OP_3DUP = 111
    OP_2OVER = 112
    OP_2ROT = 113
    OP_2SWAP = 114
    OP_IFDUP = 115
    OP_DEPTH = 116
    OP_DROP = 117
    OP_DUP = 118
    OP_NIP = 119
    OP_OVER = 120
    OP_PICK = 121
    OP_ROLL = 122
    OP_ROT = 123
    OP_SWAP = 124
    OP_TUCK = 125
    OP_SIZE = 130
    OP_EQUAL = 135
    OP_EQUALVERIFY = 136
    OP_1ADD = 139
    OP_1SUB = 140
    OP_NEGATE = 143
    OP_ABS = 144
    OP_NOT = 145
    OP_0NOTEQUAL = 146
    OP_ADD = 147
    OP_SUB = 148
    OP_BOOLAND = 154
    OP_BOOLOR = 155
    OP_NUMEQUAL = 156
    OP_NUMEQUALVERIFY = 157
    OP_NUMNOTEQUAL = 158
    OP_LESSTHAN = 159
    OP_GREATERTHAN = 160
    OP_LESSTHANOREQUAL = 161
    OP_GREATERTHANOREQUAL = 162
    OP_MIN = 163
    OP_MAX = 164
    OP_WITHIN = 165
    OP_RIPEMD160 = 166
    OP_SHA1 = 167
    OP_SHA256 = 168
    OP_HASH160 = 169
    OP_HASH256 = 170
    OP_CODESEPARATOR = 171
    OP_CHECKSIG = 172
    OP_CHECKSIGVERIFY = 173
    OP_CHECKMULTISIG = 174
    OP_CHECKMULTISIGVERIFY = 175
    OP_CHECKLOCKTIMEVERIFY = 177
    OP_CHECKSEQUENCEVERIFY = 178


ScriptValue = Union[bytes, int, str]

_MAX_DIRECT_PUSH = 75


def _opcode_bits(opcode: int) -> str:
    return format(opcode, "08b")


def _push_bits(data: bytes) -> str:
    size = len(data)
    if size > 0xFFFFFFFF:
        raise InvalidInputError(f"Push of {size} bytes is too large")
    if size > 0xFFFF:
        prefix = _opcode_bits(OpCode.OP_PUSHDATA4) + format(size, "032b")
    elif size > 0xFF:
        prefix = _opcode_bits(OpCode.OP_PUSHDATA2) + format(size, "016b")
    elif size > _MAX_DIRECT_PUSH:
        prefix = _opcode_bits(OpCode.OP_PUSHDATA1) + format(size, "08b")
    else:
        prefix = _opcode_bits(size)
    return prefix + make_buffer(data)


def make_bitcoin(data: Any) -> str:
    """Encode one script element.

    Args:
        data: ``False`` or ``0``, ``True``, a whole number from -1 to 16, bytes,
            a hex string, an :class:`OpCode` member, or an opcode name such as
            ``"OP_CHECKSIG"``

    Returns:
        Opcode byte followed by any pushed data

    Raises:
        InvalidInputError: If data cannot be expressed as a script element

    Example:
        >>> make_bitcoin(1)
        '01010001'
        >>> make_bitcoin("OP_DUP")
        '01110110'
    """
    if isinstance(data, bool):
        return _opcode_bits(OpCode.OP_TRUE if data else OpCode.OP_FALSE)

    if isinstance(data, OpCode):
        return _opcode_bits(data)

    if isinstance(data, (int, float)):
        data = as_integral(data)
        if data == 0:
            return _opcode_bits(OpCode.OP_0)
        if data < -1 or data > 16:
            raise InvalidInputError(f"Script integers must be -1 to 16, got {data}")
        return _opcode_bits(data + 80)

    if isinstance(data, str):
        if data in OpCode.__members__:
            return _opcode_bits(OpCode[data])
        try:
            data = bytes.fromhex(data)
        except ValueError as err:
            raise InvalidInputError(f"Not a hex string or opcode name: {data!r}") from err

    if isinstance(data, (bytes, bytearray, memoryview)):
        return _push_bits(bytes(data))

    raise InvalidInputError(f"Cannot encode {type(data).__name__} as a script element")


def read_bitcoin(stream: BitStream) -> ScriptValue:
    """Read one script element.

    Returns:
        ``0`` for OP_0, an int from -1 to 16 for small integers, bytes for
        pushes, or the opcode name for everything else

    Raises:
        InvalidOpCodeError: For opcode 80 or an opcode without a name
    """
    opcode = read_int(stream, 8)

    if opcode == OpCode.OP_0:
        return 0

    if opcode == 80:
        raise InvalidOpCodeError("Invalid op code 80")
    if OpCode.OP_1NEGATE <= opcode <= OpCode.OP_16:
        return opcode - 80

    if opcode <= OpCode.OP_PUSHDATA4:
        length = opcode
        if opcode == OpCode.OP_PUSHDATA4:
            length = read_big_int(stream, 32)
        elif opcode == OpCode.OP_PUSHDATA2:
            length = read_int(stream, 16)
        elif opcode == OpCode.OP_PUSHDATA1:
            length = read_int(stream, 8)
        return read_buffer(stream, length)

    try:
        return OpCode(opcode).name
    except ValueError as err:
        raise InvalidOpCodeError(f"Unknown op code {opcode}") from err
