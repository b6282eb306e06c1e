import json
from typing import Dict, List, Optional, Union

Record = Dict[str, Optional[str]]


def clean_object(obj: Union[Record, List[Record]]) -> str:
    return json.dumps(obj, indent=2, default=str)


def format_record(record: Record) -> str:
    resource_type = record.get('ResourceType') or 'Unknown'
    return '{}: Account ID: {}, Resource type: {}'.format(record['AccessKeyId'], record['AccountId'], resource_type)


def format_error(key_id: str, error: Exception) -> str:
    return '  {}: {}'.format(key_id, error)
