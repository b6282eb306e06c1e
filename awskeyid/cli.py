#!/usr/bin/env python3
import argparse
import sys
import traceback
from typing import List, Optional, Tuple

from awskeyid.aws import get_profile_access_key_id
from awskeyid.core.lib import AwsKeyIdException, KeyIdError, ProfileNotFoundError
from awskeyid.decoder import decode_accesskey_id
from awskeyid.io import Record, clean_object, format_error, format_record
from awskeyid.logging import get_data_from_traceback, log_error

description = (
    'Decodes access key IDs to get the AWS account ID without making any AWS API calls. '
    'Based on: https://medium.com/@TalBeerySec/a-short-note-on-aws-key-id-f88cc4317489'
)

parser = argparse.ArgumentParser(prog='awskeyid', add_help=True, description=description)

parser.add_argument('access_key_ids', nargs='*', metavar='access_key_id',
                    help='The access key IDs to decode. If none are provided, the access key ID of the AWS CLI profile '
                         'given by --profile (or of the default credential chain) will be used.')
parser.add_argument('--profile', default=None, help='AWS CLI profile to read the access key ID from')
parser.add_argument('--json', action='store_true', help='Print the decoded key IDs as JSON')


def decode_keys(key_ids: List[str]) -> Tuple[List[Record], List[Tuple[str, KeyIdError]]]:
    records = []
    errors = []
    for key_id in key_ids:
        key_id = key_id.strip()
        try:
            records.append(decode_accesskey_id(key_id))
        except KeyIdError as error:
            errors.append((key_id, error))
    return records, errors


def summary(records: List[Record], as_json: bool = False) -> str:
    if as_json:
        return clean_object(records)
    return '\n'.join(format_record(record) for record in records)


def run(args: argparse.Namespace) -> int:
    key_ids = args.access_key_ids
    if not key_ids:
        try:
            key_ids = [get_profile_access_key_id(args.profile)]
        except ProfileNotFoundError as error:
            print('\n  {}\n'.format(error), file=sys.stderr)
            print('  Profiles that are available:\n    {}\n'.format('\n    '.join(error.available_profiles)), file=sys.stderr)
            return 1
        except AwsKeyIdException as error:
            print('  {}'.format(error), file=sys.stderr)
            return 1

    records, errors = decode_keys(key_ids)

    if records:
        print(summary(records, as_json=args.json))
    for key_id, error in errors:
        print(format_error(key_id, error), file=sys.stderr)

    return 1 if errors else 0


def main(args: Optional[List[str]] = None) -> int:
    if args is None:
        args = sys.argv[1:]

    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as error:
        # --help and usage errors, argparse has already printed the message.
        return error.code if isinstance(error.code, int) else 1

    try:
        return run(parsed_args)
    except Exception as error:
        exception_type, exception_value, tb = sys.exc_info()
        traceback_text = '\nTraceback (most recent call last):\n{}{}: {}\n\n'.format(
            ''.join(traceback.format_tb(tb)), str(exception_type), str(exception_value)
        )
        log_error(
            traceback_text,
            exception_info='{}: {}'.format(exception_type, error),
            args=args,
            local_data=get_data_from_traceback(tb),
        )
        return 1
