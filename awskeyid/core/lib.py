# This module provides a portable way of using operating system dependent functionality.
import os

# This module provides runtime support for type hints.
from typing import List, Optional

# This module offers classes representing filesystem paths with semantics appropriate
# for different operating systems.
from pathlib import Path

# This module contains settings for awskeyid.
from awskeyid import settings


class AwsKeyIdException(Exception):
    pass


class KeyIdError(AwsKeyIdException, ValueError):
    """ Base class for every reason an access key ID can fail to decode. The
    offending key ID is kept on the exception so callers can report it. """

    def __init__(self, key_id: str, message: str) -> None:
        super().__init__(message)
        self.key_id = key_id


class InvalidLengthError(KeyIdError):
    def __init__(self, key_id: str, expected: str) -> None:
        super().__init__(key_id, 'Key ID must be {} characters long, got {}'.format(expected, len(key_id)))


class UnsupportedPrefixError(KeyIdError):
    def __init__(self, key_id: str) -> None:
        super().__init__(key_id, 'Key ID starting with "{}" cannot be decoded, only key IDs beginning with "A" '
                                 'are supported'.format(key_id[:1]))


class UnknownPrefixError(KeyIdError):
    def __init__(self, key_id: str) -> None:
        self.prefix = key_id[:4].upper()
        super().__init__(key_id, 'Unknown key ID prefix: {}'.format(self.prefix))


class InvalidCharacterError(KeyIdError):
    def __init__(self, key_id: str, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(key_id, 'Invalid base32 character {!r} at position {}'.format(character, position))


class ProfileNotFoundError(AwsKeyIdException):
    def __init__(self, profile_name: str, available_profiles: Optional[List[str]] = None) -> None:
        self.profile_name = profile_name
        self.available_profiles = list(available_profiles or [])
        super().__init__('Did not find the AWS CLI profile: {}'.format(profile_name))


class CredentialsNotFoundError(AwsKeyIdException):
    pass


def home_dir() -> Path:
    p = Path(settings.home_dir).expanduser().absolute()
    os.makedirs(p, exist_ok=True, mode=0o700)
    return p
