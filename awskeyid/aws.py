from typing import List, Optional

import boto3
import botocore.exceptions
import botocore.session

from awskeyid.core.lib import CredentialsNotFoundError, ProfileNotFoundError


def available_profiles() -> List[str]:
    # Reads the profile map only, so a bad AWS_PROFILE does not get in the way.
    return list(botocore.session.Session().available_profiles)


def get_profile_access_key_id(profile_name: Optional[str] = None) -> str:
    """ Return the access key ID boto3 resolves for profile_name, or for the
    default credential chain when no profile is given. Credentials are only
    looked up locally, no request is sent to STS. """
    try:
        boto3_session = boto3.session.Session(profile_name=profile_name)
        creds = boto3_session.get_credentials()
    except botocore.exceptions.ProfileNotFound as error:
        # Without profile_name the missing profile came from AWS_PROFILE.
        missing_profile = profile_name or error.kwargs.get('profile') or 'default'
        raise ProfileNotFoundError(missing_profile, available_profiles()) from None

    if creds is None or not creds.access_key:
        raise CredentialsNotFoundError('No AWS credentials found for profile: {}'.format(profile_name or 'default'))

    return creds.access_key
