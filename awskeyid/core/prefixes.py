from types import MappingProxyType
from typing import Mapping

# https://docs.aws.amazon.com/IAM/latest/UserGuide/reference_identifiers.html#identifiers-prefixes
RESOURCE_TYPES: Mapping[str, str] = MappingProxyType({
    'ABIA': 'EC2 dedicated host',
    'ACCA': 'Context-specific credential',
    'ACPA': 'Context-specific credential',
    'AGPA': 'Group',
    'AIDA': 'IAM user',
    'AIPA': 'Amazon EC2 instance profile',
    'AKIA': 'Access key',
    'ANPA': 'Managed policy',
    'ANVA': 'Version in a managed policy',
    'AROA': 'Role',
    'APKA': 'Public key',
    'ASCA': 'Certificate',
    'ASIA': 'Temporary (STS) access key',
})

PREFIX_LENGTH = 4
