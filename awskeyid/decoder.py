"""Decode the AWS account ID an access key ID was issued for.

Based on: https://medium.com/@TalBeerySec/a-short-note-on-aws-key-id-f88cc4317489

The 16 characters following the four-letter resource prefix are base32. The
account ID sits in bits 7 through 46 of the first six decoded bytes. Only key
IDs with a prefix beginning with "A" are supported, older key IDs beginning
with "I" or "J" are not.
"""
from typing import Dict, Optional

from awskeyid.core.lib import (
    InvalidCharacterError, InvalidLengthError, UnknownPrefixError, UnsupportedPrefixError,
)
from awskeyid.core.prefixes import PREFIX_LENGTH, RESOURCE_TYPES

KEY_ID_LENGTH = 20

# RFC 4648, no padding
BASE32_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ234567'
BASE32_VALUES = {c: i for i, c in enumerate(BASE32_ALPHABET)}

# 16 characters * 5 bits, the mask applies to the leading 48 bits.
PAYLOAD_BITS = (KEY_ID_LENGTH - PREFIX_LENGTH) * 5
WINDOW_SHIFT = PAYLOAD_BITS - 48

ACCOUNT_ID_MASK = 0x7FFFFFFFFF80
ACCOUNT_ID_SHIFT = 7


def get_associated_resource_type(key_id: str) -> str:
    """ Return the resource type label of the key ID's four-letter prefix. """
    if len(key_id) < PREFIX_LENGTH:
        raise InvalidLengthError(key_id, 'at least {}'.format(PREFIX_LENGTH))

    try:
        return RESOURCE_TYPES[key_id[:PREFIX_LENGTH].upper()]
    except KeyError:
        raise UnknownPrefixError(key_id) from None


def _base32_to_int(key_id: str, start: int) -> int:
    value = 0
    for position in range(start, len(key_id)):
        character = key_id[position]
        digit = BASE32_VALUES.get(character)
        if digit is None:
            raise InvalidCharacterError(key_id, character, position)
        value = (value << 5) | digit
    return value


def get_aws_account_id(key_id: str) -> str:
    """ Decode the AWS account ID from a 20 character access key ID.

    The account field is 40 bits wide. Account IDs are zero padded to 12
    digits; values above 999999999999, which real key IDs never encode, come
    back as 13 digits rather than being truncated. """
    if len(key_id) != KEY_ID_LENGTH:
        raise InvalidLengthError(key_id, str(KEY_ID_LENGTH))

    if key_id[0] != 'A':
        raise UnsupportedPrefixError(key_id)

    value = _base32_to_int(key_id, PREFIX_LENGTH)
    account_id = ((value >> WINDOW_SHIFT) & ACCOUNT_ID_MASK) >> ACCOUNT_ID_SHIFT

    return '{:012d}'.format(account_id)


def decode_accesskey_id(key_id: str) -> Dict[str, Optional[str]]:
    account_id = get_aws_account_id(key_id)

    try:
        resource_type: Optional[str] = get_associated_resource_type(key_id)
    except UnknownPrefixError:
        resource_type = None

    return {
        'AccessKeyId': key_id,
        'AccountId': account_id,
        'ResourceType': resource_type,
    }
