from awskeyid.core.lib import (  # noqa: F401
    AwsKeyIdException, CredentialsNotFoundError, InvalidCharacterError, InvalidLengthError, KeyIdError,
    ProfileNotFoundError, UnknownPrefixError, UnsupportedPrefixError,
)
from awskeyid.core.prefixes import RESOURCE_TYPES  # noqa: F401
from awskeyid.decoder import decode_accesskey_id, get_associated_resource_type, get_aws_account_id  # noqa: F401
